"""
Users API endpoints.

Exposes the signed-in profile, the owner picker list and admin role changes.
"""
from typing import Any, Dict, List
import uuid
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ims.actions import users as actions
from ims.actions.base import ActionContext
from ims.api.deps import get_action_context, require_current_user
from ims.api.intake import json_or_form
from ims.api.permissions import can_delete, can_write
from ims.api.responses import action_response
from ims.db import models, schemas
from ims.db.database import get_db
from ims.db.repositories import users as repo

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me")
def get_me(user: models.User = Depends(require_current_user)):
    return {
        **schemas.User.model_validate(user).model_dump(mode="json"),
        "can_write": can_write(user),
        "can_delete": can_delete(user),
    }


@router.get("", response_model=List[schemas.UserSummary])
def list_users(db: Session = Depends(get_db), _user: models.User = Depends(require_current_user)):
    return repo.get_active_users(db)


@router.patch("/{user_id}")
def update_user(
    user_id: uuid.UUID,
    payload: Dict[str, Any] = Depends(json_or_form),
    ctx: ActionContext = Depends(get_action_context),
):
    return action_response(actions.update_user(ctx, user_id, payload))
