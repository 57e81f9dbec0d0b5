import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

import ims.db.database as db_module
from ims.db import models
from ims.db.database import SessionLocal, ensure_sqlite_schema
from ims.invalidation import reset_invalidator_for_tests

_IDENTITY_ENV = (
    "DEV_MODE",
    "ALLOW_DEV_MODE",
    "DEV_MODE_ALLOWED_HOSTS",
    "ADMIN_EMAILS",
    "EDITOR_EMAILS",
    "DEFAULT_USER_ROLE",
    "REVALIDATE_WEBHOOK_URL",
    "REVALIDATE_SECRET",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Each test starts signed out of dev mode with no role overrides or webhook."""
    for var in _IDENTITY_ENV:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("APP_BASE_URL", "http://localhost:3000")
    reset_invalidator_for_tests()
    yield
    reset_invalidator_for_tests()


def _clear_tables(session: Session):
    session.rollback()
    for table in reversed(models.Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()


@pytest.fixture
def db_session():
    ensure_sqlite_schema()
    session = SessionLocal()
    try:
        yield session
    finally:
        _clear_tables(session)
        session.close()


# Backwards compatibility: some tests read more naturally with 'db'
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client(db_session):
    from ims.api.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[db_module.get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(db_module.get_db, None)


@pytest.fixture
def user_factory(db_session: Session):
    def _create(email: str = None, role: str = "viewer", name: str = None, active: bool = True):
        email = email or f"user_{uuid.uuid4().hex[:8]}@example.com"
        user = models.User(email=email, name=name or email.split("@")[0], role=role, active=active)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _create


@pytest.fixture
def admin(user_factory):
    return user_factory("admin@example.com", role="admin", name="Ada Admin")


@pytest.fixture
def editor(user_factory):
    return user_factory("editor@example.com", role="editor", name="Eddie Editor")


@pytest.fixture
def viewer(user_factory):
    return user_factory("viewer@example.com", role="viewer", name="Vera Viewer")


@pytest.fixture
def auth_headers():
    """Proxy identity headers for a user or a bare email."""
    def _headers(user_or_email) -> dict:
        email = getattr(user_or_email, "email", user_or_email)
        return {"x-auth-request-email": email}
    return _headers


@pytest.fixture
def recorded_paths():
    """Invalidated route paths captured for the current test."""
    return []


@pytest.fixture
def ctx_factory(db_session, recorded_paths):
    from ims.actions.base import ActionContext

    def _create(user=None):
        return ActionContext(db=db_session, user=user, invalidate=recorded_paths.append)
    return _create
