"""
Organisational context (risk register) API endpoints.
"""
from typing import Any, Dict, Optional
import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ims.actions import organizational_context as actions
from ims.actions.base import ActionContext
from ims.api.deps import get_action_context, require_read
from ims.api.intake import json_or_form
from ims.api.responses import action_response
from ims.db import schemas
from ims.db.database import get_db
from ims.db.repositories import organizational_context as repo

router = APIRouter(prefix="/organisational-context", tags=["organisational-context"])


@router.get("", response_model=schemas.OrganizationalContextListing)
def list_entries(
    include_archived: bool = False,
    category: Optional[str] = None,
    db: Session = Depends(get_db),
    _user=Depends(require_read),
):
    entries = repo.get_entries(db, include_archived=include_archived, category=category)
    return {"entries": entries, "by_category": repo.group_by_category(entries)}


@router.get("/{entry_id}", response_model=schemas.OrganizationalContextEntry)
def get_entry(entry_id: uuid.UUID, db: Session = Depends(get_db), _user=Depends(require_read)):
    entry = repo.get_entry(db, entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Context entry not found")
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


@router.post("/{entry_id}/archive")
def archive_entry(entry_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.archive_entry(ctx, entry_id))


@router.post("/{entry_id}/unarchive")
def unarchive_entry(entry_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.unarchive_entry(ctx, entry_id))


@router.post("/{entry_id}/toggle-archive")
def toggle_archive_entry(entry_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.toggle_archive_entry(ctx, entry_id))


@router.delete("/{entry_id}")
def delete_entry(entry_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.delete_entry(ctx, entry_id))
