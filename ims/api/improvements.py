"""
Improvement register API endpoints.

The listing splits open and completed improvements and reports the latest
reference number so clients can preview the next one.
"""
from typing import Any, Dict, Optional
import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ims.actions import improvements as actions
from ims.actions.base import ActionContext
from ims.api.deps import get_action_context, require_read
from ims.api.intake import json_or_form
from ims.api.responses import action_response
from ims.db import schemas
from ims.db.database import get_db
from ims.db.repositories import improvements as repo

router = APIRouter(prefix="/improvement-register", tags=["improvement-register"])


@router.get("", response_model=schemas.ImprovementListing)
def list_improvements(
    show_archived: bool = False,
    category: Optional[str] = None,
    type: Optional[str] = None,
    root_cause_type: Optional[str] = None,
    db: Session = Depends(get_db),
    _user=Depends(require_read),
):
    filters = {"archived": show_archived, "category": category, "type": type, "root_cause_type": root_cause_type}
    return {
        "open": repo.get_improvements(db, completed=False, **filters),
        "completed": repo.get_improvements(db, completed=True, **filters),
        "latest_number": repo.latest_number(db),
    }


@router.get("/{improvement_id}", response_model=schemas.Improvement)
def get_improvement(improvement_id: uuid.UUID, db: Session = Depends(get_db), _user=Depends(require_read)):
    improvement = repo.get_improvement(db, improvement_id)
    if improvement is None:
        raise HTTPException(status_code=404, detail="Improvement not found")
    return improvement


@router.post("")
def create_improvement(payload: Dict[str, Any] = Depends(json_or_form), ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.create_improvement(ctx, payload), success_status=201)


@router.put("/{improvement_id}")
def update_improvement(
    improvement_id: uuid.UUID,
    payload: Dict[str, Any] = Depends(json_or_form),
    ctx: ActionContext = Depends(get_action_context),
):
    return action_response(actions.update_improvement(ctx, improvement_id, payload))


@router.post("/{improvement_id}/archive")
def archive_improvement(improvement_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.archive_improvement(ctx, improvement_id))


@router.post("/{improvement_id}/restore")
def restore_improvement(improvement_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.restore_improvement(ctx, improvement_id))


@router.delete("/{improvement_id}")
def delete_improvement(improvement_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.delete_improvement(ctx, improvement_id))
