"""
Role-based permission utilities for register users.

The role table decides which of the read/write/delete permissions a user
holds; route handlers and actions ask through `ims.api.permissions`.
"""

from typing import Dict, FrozenSet
from enum import Enum


# Central role constants to ensure consistency across the codebase
ROLE_ADMIN = "admin"
ROLE_EDITOR = "editor"
ROLE_VIEWER = "viewer"

PERMISSION_READ = "read"
PERMISSION_WRITE = "write"
PERMISSION_DELETE = "delete"

ROLE_PERMISSIONS = {
    ROLE_ADMIN: {
        "can_read": True,
        "can_write": True,
        "can_delete": True,
    },
    ROLE_EDITOR: {
        "can_read": True,
        "can_write": True,
        "can_delete": False,
    },
    ROLE_VIEWER: {
        "can_read": True,
        "can_write": False,
        "can_delete": False,
    },
}

ALLOWED_ROLES = set(ROLE_PERMISSIONS.keys())
ALLOWED_PERMISSIONS: FrozenSet[str] = frozenset({PERMISSION_READ, PERMISSION_WRITE, PERMISSION_DELETE})

# Derived role groups
WRITE_ROLES: FrozenSet[str] = frozenset({ROLE_ADMIN, ROLE_EDITOR})
DELETE_ROLES: FrozenSet[str] = frozenset({ROLE_ADMIN})


class RoleEnum(str, Enum):
    """Enum for user roles used in schemas and validation."""
    admin = ROLE_ADMIN
    editor = ROLE_EDITOR
    viewer = ROLE_VIEWER


def get_role_permissions(role: str) -> Dict[str, bool]:
    """
    Get the permissions for a given role.

    Args:
        role: The role name (admin, editor, viewer)

    Returns:
        Dict with can_read, can_write and can_delete boolean values

    Raises:
        ValueError: If role is not recognized
    """
    if role not in ROLE_PERMISSIONS:
        raise ValueError(f"Unknown role: {role}. Allowed roles: {list(ROLE_PERMISSIONS.keys())}")

    return ROLE_PERMISSIONS[role].copy()


def validate_role(role: str) -> None:
    """
    Validate that a role is allowed.

    Raises:
        ValueError: If role is not allowed
    """
    if role not in ALLOWED_ROLES:
        raise ValueError(f"Invalid role '{role}'. Allowed roles: {sorted(ALLOWED_ROLES)}")


def role_allows(role: str, permission: str) -> bool:
    """Return True if ``role`` grants ``permission`` (read/write/delete)."""
    if permission not in ALLOWED_PERMISSIONS:
        raise ValueError(f"Unknown permission: {permission}")
    return bool(ROLE_PERMISSIONS.get(role, {}).get(f"can_{permission}", False))


def role_allows_write(role: str) -> bool:
    """Return True if the role implies write permissions."""
    return role in WRITE_ROLES


def role_allows_delete(role: str) -> bool:
    """Return True if the role may hard-delete records."""
    return role in DELETE_ROLES
