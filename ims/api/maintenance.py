"""
Maintenance and calibration schedule API endpoints.
"""
from typing import Any, Dict, Optional
import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ims.actions import maintenance as actions
from ims.actions.base import ActionContext
from ims.api.deps import get_action_context, require_read
from ims.api.intake import json_or_form
from ims.api.responses import action_response
from ims.db import schemas
from ims.db.database import get_db
from ims.db.repositories import maintenance as repo

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.get("", response_model=schemas.MaintenanceListing)
def list_items(
    show_archived: bool = False,
    category: Optional[str] = None,
    sub_category: Optional[str] = None,
    status: Optional[str] = None,
    owner_id: Optional[uuid.UUID] = None,
    allocated_to_id: Optional[uuid.UUID] = None,
    db: Session = Depends(get_db),
    _user=Depends(require_read),
):
    """Open and closed maintenance/calibration items, soonest due first."""
    items = repo.get_items(
        db,
        archived=show_archived,
        category=category,
        sub_category=sub_category,
        status=status,
        owner_id=owner_id,
        allocated_to_id=allocated_to_id,
    )
    listing = repo.split_items(items)
    listing["sub_categories"] = repo.get_sub_categories(db)
    return listing


@router.get("/{item_id}", response_model=schemas.MaintenanceItemDetail)
def get_item(item_id: uuid.UUID, db: Session = Depends(get_db), _user=Depends(require_read)):
    item = repo.get_item(db, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Maintenance item not found")
    return item


@router.post("")
def create_item(payload: Dict[str, Any] = Depends(json_or_form), ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.create_item(ctx, payload), success_status=201)


@router.put("/{item_id}")
def update_item(
    item_id: uuid.UUID,
    payload: Dict[str, Any] = Depends(json_or_form),
    ctx: ActionContext = Depends(get_action_context),
):
    return action_response(actions.update_item(ctx, item_id, payload))


@router.post("/{item_id}/archive")
def archive_item(item_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.archive_item(ctx, item_id))


@router.post("/{item_id}/unarchive")
def unarchive_item(item_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.unarchive_item(ctx, item_id))


@router.post("/{item_id}/toggle-archive")
def toggle_archive_item(item_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.toggle_archive_item(ctx, item_id))


@router.post("/{item_id}/documents")
def attach_item_document(
    item_id: uuid.UUID,
    payload: Dict[str, Any] = Depends(json_or_form),
    ctx: ActionContext = Depends(get_action_context),
):
    return action_response(actions.attach_document(ctx, item_id, payload), success_status=201)


@router.delete("/{item_id}")
def delete_item(item_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.delete_item(ctx, item_id))
