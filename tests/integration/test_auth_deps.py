from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

import ims.db.database as db_module
from ims.api.auth import get_or_create_user
from ims.api.deps import get_current_user


def _probe_app(db_session):
    app = FastAPI()

    @app.get("/me")
    def me(user=Depends(get_current_user)):
        if user is None:
            return {"user": None}
        return {"email": user.email, "role": user.role}

    def _override_get_db():
        yield db_session
    app.dependency_overrides[db_module.get_db] = _override_get_db
    return TestClient(app)


def test_no_identity_resolves_to_none(db_session):
    r = _probe_app(db_session).get("/me")
    assert r.status_code == 200
    assert r.json() == {"user": None}


def test_header_identity_upserts_viewer(db_session):
    client = _probe_app(db_session)
    r = client.get("/me", headers={"X-Auth-Request-Email": "New.Person@Example.com"})
    assert r.json() == {"email": "new.person@example.com", "role": "viewer"}
    r = client.get("/me", headers={"X-Forwarded-Email": "new.person@example.com"})
    assert r.json()["email"] == "new.person@example.com"


def test_default_role_from_env(db_session, monkeypatch):
    monkeypatch.setenv("DEFAULT_USER_ROLE", "editor")
    user = get_or_create_user(db_session, "someone@example.com")
    assert user.role == "editor"


def test_unknown_default_role_falls_back_to_viewer(db_session, monkeypatch):
    monkeypatch.setenv("DEFAULT_USER_ROLE", "superuser")
    assert get_or_create_user(db_session, "other@example.com").role == "viewer"


def test_admin_and_editor_emails_elevate(db_session, monkeypatch, user_factory):
    user_factory("boss@example.com", role="viewer")
    monkeypatch.setenv("ADMIN_EMAILS", "boss@example.com")
    monkeypatch.setenv("EDITOR_EMAILS", "clerk@example.com")
    assert get_or_create_user(db_session, "boss@example.com").role == "admin"
    assert get_or_create_user(db_session, "clerk@example.com").role == "editor"


def test_editor_emails_do_not_demote_admin(db_session, monkeypatch, user_factory):
    user_factory("lead@example.com", role="admin")
    monkeypatch.setenv("EDITOR_EMAILS", "lead@example.com")
    assert get_or_create_user(db_session, "lead@example.com").role == "admin"


def test_inactive_user_resolves_to_none(db_session, user_factory):
    user_factory("gone@example.com", role="editor", active=False)
    r = _probe_app(db_session).get("/me", headers={"X-Auth-Request-Email": "gone@example.com"})
    assert r.json() == {"user": None}


def test_dev_mode_signs_in_dev_admin(db_session, monkeypatch):
    monkeypatch.setenv("DEV_MODE", "true")
    r = _probe_app(db_session).get("/me")
    assert r.json() == {"email": "dev@localhost", "role": "admin"}
