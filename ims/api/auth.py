"""
Authentication helpers and identity resolution.

Parses proxy headers, normalizes emails, and upserts users while supporting
role elevation via environment configuration.
"""
import logging
import os
from typing import Optional, Tuple
from sqlalchemy.orm import Session

from ims.db import models
from ims.db.repositories import users as users_repo
from ims.utils.role_permissions import ROLE_ADMIN, ROLE_EDITOR, ROLE_VIEWER, ALLOWED_ROLES

logger = logging.getLogger(__name__)


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    return email.strip().lower()


def _normalize_list_env(var_name: str) -> set:
    raw = os.getenv(var_name, "")
    values = set()
    for entry in raw.split(","):
        cleaned = entry.strip().strip('"').strip("'")
        if cleaned:
            values.add(cleaned.lower())
    return values


def _admin_emails() -> set:
    return _normalize_list_env("ADMIN_EMAILS")


def _editor_emails() -> set:
    return _normalize_list_env("EDITOR_EMAILS")


def _default_role() -> str:
    role = (os.getenv("DEFAULT_USER_ROLE") or ROLE_VIEWER).strip().lower()
    if role not in ALLOWED_ROLES:
        logger.warning("Ignoring unknown DEFAULT_USER_ROLE '%s'", role)
        return ROLE_VIEWER
    return role


def configured_role(email: str) -> Optional[str]:
    """Role forced by ADMIN_EMAILS / EDITOR_EMAILS, if any."""
    if email in _admin_emails():
        return ROLE_ADMIN
    if email in _editor_emails():
        return ROLE_EDITOR
    return None


def resolve_identity_from_headers(
    x_auth_request_user: Optional[str],
    x_auth_request_email: Optional[str],
    x_forwarded_user: Optional[str],
    x_forwarded_email: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    user = x_auth_request_user or x_forwarded_user
    email = _normalize_email(x_auth_request_email or x_forwarded_email)
    return user, email


def get_or_create_user(db: Session, email: str, display_name: Optional[str] = None) -> models.User:
    email = _normalize_email(email)
    user = users_repo.get_user_by_email(db, email)
    forced_role = configured_role(email)
    if not user:
        user = models.User(
            email=email,
            name=display_name or email.split("@")[0],
            role=forced_role or _default_role(),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("user_created: email=%s role=%s", email, user.role)
        return user

    # Existing users might predate a new ADMIN_EMAILS / EDITOR_EMAILS value
    if forced_role == ROLE_ADMIN and user.role != ROLE_ADMIN:
        user.role = ROLE_ADMIN
    elif forced_role == ROLE_EDITOR and user.role == ROLE_VIEWER:
        user.role = ROLE_EDITOR
    else:
        return user
    db.commit()
    db.refresh(user)
    logger.info("user_role_elevated: email=%s role=%s", email, user.role)
    return user
