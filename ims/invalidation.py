"""Presentation invalidation: tell the UI layer that a page's data changed."""
from __future__ import annotations

import logging
import os
import threading
from collections import deque
from dataclasses import dataclass
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = (3, 10)
_RECENT_LIMIT = 200


@dataclass
class InvalidationConfig:
    webhook_url: Optional[str] = None
    secret: Optional[str] = None

    @classmethod
    def from_env(cls) -> "InvalidationConfig":
        url = (os.getenv("REVALIDATE_WEBHOOK_URL") or "").strip()
        return cls(
            webhook_url=url or None,
            secret=os.getenv("REVALIDATE_SECRET") or None,
        )


class Invalidator:
    """Records invalidated route paths and optionally forwards them to a webhook.

    Webhook errors are logged; they never propagate to the caller.
    """

    def __init__(self, config: Optional[InvalidationConfig] = None) -> None:
        self.config = config or InvalidationConfig.from_env()
        self._recent: deque = deque(maxlen=_RECENT_LIMIT)
        self._lock = threading.Lock()

    def __call__(self, route_path: str) -> None:
        self.invalidate(route_path)

    def invalidate(self, route_path: str) -> None:
        logger.info("invalidate: path=%s", route_path)
        with self._lock:
            self._recent.append(route_path)
        if self.config.webhook_url:
            self._notify(route_path)

    def _notify(self, route_path: str) -> None:
        headers = {"Content-Type": "application/json"}
        if self.config.secret:
            headers["X-Revalidate-Secret"] = self.config.secret
        try:
            response = requests.post(
                self.config.webhook_url,
                json={"path": route_path},
                headers=headers,
                timeout=_DEFAULT_TIMEOUT,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("invalidate webhook failed for %s: %s", route_path, exc)

    @property
    def recent(self) -> List[str]:
        with self._lock:
            return list(self._recent)

    def clear(self) -> None:
        with self._lock:
            self._recent.clear()


_invalidator: Optional[Invalidator] = None


def get_invalidator() -> Invalidator:
    global _invalidator
    if _invalidator is None:
        _invalidator = Invalidator()
    return _invalidator


def invalidate(route_path: str) -> None:
    get_invalidator().invalidate(route_path)


def reset_invalidator_for_tests() -> None:  # pragma: no cover - used in tests
    global _invalidator
    _invalidator = None
