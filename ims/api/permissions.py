"""
Permission checks for register access control.

Key helpers:
- has_permission(user, action) for "read", "write" and "delete"
- can_write(user) / can_delete(user) shorthands
"""
from typing import Optional

from ims.utils.role_permissions import (
    PERMISSION_DELETE,
    PERMISSION_WRITE,
    role_allows,
)


def has_permission(user, action: str) -> bool:
    """Return True when an active user's role grants ``action``."""
    if user is None or not getattr(user, "active", False):
        return False
    return role_allows(getattr(user, "role", None), action)


def can_write(user: Optional[object]) -> bool:
    return has_permission(user, PERMISSION_WRITE)


def can_delete(user: Optional[object]) -> bool:
    return has_permission(user, PERMISSION_DELETE)
