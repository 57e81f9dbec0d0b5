"""Dev-mode switch: sign every request in as a local admin, but only on a local install."""

import os
from typing import FrozenSet, Optional
from urllib.parse import urlparse

DEV_USER_EMAIL = "dev@localhost"
DEV_USER_NAME = "Development User"

LOCAL_HOSTS: FrozenSet[str] = frozenset({"localhost", "127.0.0.1", "::1"})


class DevModeMisconfigured(RuntimeError):
    """DEV_MODE is on for an install that is not local."""


def _truthy(name: str) -> bool:
    return os.getenv(name, "").strip().lower() == "true"


def _base_url_host() -> Optional[str]:
    raw = os.getenv("APP_BASE_URL", "").strip()
    if not raw:
        return None
    if "://" not in raw:
        raw = f"http://{raw}"
    host = urlparse(raw).hostname
    return host.lower() if host else None


def _dev_hosts() -> FrozenSet[str]:
    extra = os.getenv("DEV_MODE_ALLOWED_HOSTS", "")
    return LOCAL_HOSTS | {host.strip().lower() for host in extra.split(",") if host.strip()}


def dev_mode_requested() -> bool:
    return _truthy("DEV_MODE")


def dev_mode_active() -> bool:
    """Whether requests resolve to the dev admin.

    Raises DevModeMisconfigured when DEV_MODE is set but APP_BASE_URL names a
    host outside LOCAL_HOSTS/DEV_MODE_ALLOWED_HOSTS, or is unset without
    ALLOW_DEV_MODE=true.
    """
    if not dev_mode_requested():
        return False
    host = _base_url_host()
    if host is None:
        if not _truthy("ALLOW_DEV_MODE"):
            raise DevModeMisconfigured("DEV_MODE=true needs a localhost APP_BASE_URL or ALLOW_DEV_MODE=true")
        return True
    allowed = _dev_hosts()
    if host not in allowed:
        raise DevModeMisconfigured(f"DEV_MODE=true is not allowed for host {host!r} (allowed: {sorted(allowed)})")
    return True
