"""
Legal register API endpoints.
"""
from typing import Any, Dict
import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ims.actions import legal as actions
from ims.actions.base import ActionContext
from ims.api.deps import get_action_context, require_read
from ims.api.intake import json_or_form
from ims.api.responses import action_response
from ims.db import schemas
from ims.db.database import get_db
from ims.db.repositories import legal as repo

router = APIRouter(prefix="/legal-register", tags=["legal-register"])


@router.get("", response_model=schemas.LegalRegisterListing)
def list_entries(db: Session = Depends(get_db), _user=Depends(require_read)):
    return {
        "approved": repo.get_entries(db, approved=True),
        "unapproved": repo.get_entries(db, approved=False),
        "archived": repo.get_entries(db, archived=True),
    }


@router.get("/{entry_id}", response_model=schemas.LegalRegisterEntry)
def get_entry(entry_id: uuid.UUID, db: Session = Depends(get_db), _user=Depends(require_read)):
    entry = repo.get_entry(db, entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Legal register entry not found")
    return entry


@router.post("")
def create_entry(payload: Dict[str, Any] = Depends(json_or_form), ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.create_entry(ctx, payload), success_status=201)


@router.put("/{entry_id}")
def update_entry(
    entry_id: uuid.UUID,
    payload: Dict[str, Any] = Depends(json_or_form),
    ctx: ActionContext = Depends(get_action_context),
):
    return action_response(actions.update_entry(ctx, entry_id, payload))


@router.post("/{entry_id}/approve")
def approve_entry(entry_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.approve_entry(ctx, entry_id))


@router.post("/{entry_id}/reviews")
def add_review(
    entry_id: uuid.UUID,
    payload: Dict[str, Any] = Depends(json_or_form),
    ctx: ActionContext = Depends(get_action_context),
):
    return action_response(actions.add_review(ctx, entry_id, payload), success_status=201)


@router.post("/{entry_id}/archive")
def archive_entry(entry_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.archive_entry(ctx, entry_id))


@router.post("/{entry_id}/unarchive")
def unarchive_entry(entry_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.unarchive_entry(ctx, entry_id))


@router.delete("/{entry_id}")
def delete_entry(entry_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.delete_entry(ctx, entry_id))
