import pytest
from types import SimpleNamespace

from ims.api.permissions import can_delete, can_write, has_permission
from ims.utils.role_permissions import (
    get_role_permissions,
    role_allows,
    role_allows_delete,
    role_allows_write,
    validate_role,
)


def test_role_table():
    assert get_role_permissions("admin") == {"can_read": True, "can_write": True, "can_delete": True}
    assert get_role_permissions("editor") == {"can_read": True, "can_write": True, "can_delete": False}
    assert get_role_permissions("viewer") == {"can_read": True, "can_write": False, "can_delete": False}


def test_get_role_permissions_returns_copy():
    perms = get_role_permissions("viewer")
    perms["can_write"] = True
    assert get_role_permissions("viewer")["can_write"] is False


def test_unknown_role_and_permission():
    with pytest.raises(ValueError):
        get_role_permissions("owner")
    with pytest.raises(ValueError):
        validate_role("owner")
    with pytest.raises(ValueError):
        role_allows("admin", "manage")
    assert role_allows("owner", "read") is False


def test_role_helpers():
    assert role_allows_write("editor") and not role_allows_write("viewer")
    assert role_allows_delete("admin") and not role_allows_delete("editor")


def _user(role, active=True):
    return SimpleNamespace(role=role, active=active)


def test_has_permission_by_role():
    assert has_permission(_user("admin"), "delete")
    assert has_permission(_user("editor"), "write")
    assert not has_permission(_user("editor"), "delete")
    assert has_permission(_user("viewer"), "read")
    assert not has_permission(_user("viewer"), "write")


def test_has_permission_denies_missing_or_inactive_user():
    assert not has_permission(None, "read")
    assert not has_permission(_user("admin", active=False), "write")
    assert not can_write(None)
    assert not can_delete(_user("editor"))
