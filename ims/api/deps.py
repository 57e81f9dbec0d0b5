"""
API dependency helpers.

Resolves the acting user from proxy headers (or the dev user) and builds the
context handed to actions.
"""
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from ims.actions.base import ActionContext
from ims.api.auth import resolve_identity_from_headers, get_or_create_user
from ims.api.permissions import has_permission
from ims.db import models
from ims.db.database import get_db
from ims.invalidation import get_invalidator
from ims.utils.role_permissions import ROLE_ADMIN
from ims.utils.runtime import DEV_USER_EMAIL, DEV_USER_NAME, dev_mode_active

# Contract:
# get_current_user returns the active ORM user, or None when no identity is
# present or the user is deactivated. Routes decide what None means.


def get_current_user(
    db: Session = Depends(get_db),
    x_auth_request_user: Optional[str] = Header(default=None),
    x_auth_request_email: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    x_forwarded_email: Optional[str] = Header(default=None),
) -> Optional[models.User]:
    if dev_mode_active():
        user = get_or_create_user(db, email=DEV_USER_EMAIL, display_name=DEV_USER_NAME)
        if user.role != ROLE_ADMIN:
            user.role = ROLE_ADMIN
            db.commit()
            db.refresh(user)
        return user

    name, email = resolve_identity_from_headers(
        x_auth_request_user=x_auth_request_user,
        x_auth_request_email=x_auth_request_email,
        x_forwarded_user=x_forwarded_user,
        x_forwarded_email=x_forwarded_email,
    )
    if not email:
        return None
    user = get_or_create_user(db, email=email, display_name=name)
    if not user.active:
        return None
    return user


def require_current_user(user: Optional[models.User] = Depends(get_current_user)) -> models.User:
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    return user


def require_admin(user: models.User = Depends(require_current_user)) -> models.User:
    if user.role != ROLE_ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return user


def require_read(user: Optional[models.User] = Depends(get_current_user)) -> Optional[models.User]:
    """Reads are open to guests; a signed-in user still needs read permission."""
    if user is not None and not has_permission(user, "read"):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Read permission required")
    return user


def get_action_context(
    db: Session = Depends(get_db),
    user: Optional[models.User] = Depends(get_current_user),
) -> ActionContext:
    return ActionContext(db=db, user=user, invalidate=get_invalidator())
