"""
User repository functions.
"""
from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from ims.db import models


def get_user(db: Session, user_id: uuid.UUID):
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_email(db: Session, email: str):
    return db.query(models.User).filter(models.User.email == email).first()


def get_active_users(db: Session):
    """Users offered in owner/auditor pickers, by name."""
    return (
        db.query(models.User)
        .filter(models.User.active.is_(True))
        .order_by(models.User.name.asc(), models.User.email.asc())
        .all()
    )


def update_user(db: Session, user_id: uuid.UUID, *, role: str | None = None, active: bool | None = None):
    user = get_user(db, user_id)
    if user is None:
        return None
    if role is not None:
        user.role = role
    if active is not None:
        user.active = active
    db.commit()
    db.refresh(user)
    return user
