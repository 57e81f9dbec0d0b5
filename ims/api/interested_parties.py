"""
Interested parties API endpoints.

Listing in display order, CRUD, archive/unarchive and one-step reordering.
"""
from typing import Any, Dict, List, Optional
import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ims.actions import interested_parties as actions
from ims.actions.base import ActionContext
from ims.api.deps import get_action_context, require_read
from ims.api.intake import json_or_form
from ims.api.responses import action_response
from ims.db import schemas
from ims.db.database import get_db
from ims.db.repositories import interested_parties as repo

router = APIRouter(prefix="/interested-parties", tags=["interested-parties"])


@router.get("", response_model=List[schemas.InterestedParty])
def list_interested_parties(
    show_archived: bool = False,
    db: Session = Depends(get_db),
    _user=Depends(require_read),
):
    """Active parties by order, or only archived ones with ``show_archived``."""
    return repo.get_interested_parties(db, archived=show_archived)


@router.get("/{party_id}", response_model=schemas.InterestedParty)
def get_interested_party(
    party_id: uuid.UUID,
    db: Session = Depends(get_db),
    _user=Depends(require_read),
):
    party = repo.get_interested_party(db, party_id)
    if party is None:
        raise HTTPException(status_code=404, detail="Interested party not found")
    return party


@router.post("")
def create_interested_party(
    payload: Dict[str, Any] = Depends(json_or_form),
    ctx: ActionContext = Depends(get_action_context),
):
    return action_response(actions.create_interested_party(ctx, payload), success_status=201)


@router.put("/{party_id}")
def update_interested_party(
    party_id: uuid.UUID,
    payload: Dict[str, Any] = Depends(json_or_form),
    ctx: ActionContext = Depends(get_action_context),
):
    return action_response(actions.update_interested_party(ctx, party_id, payload))


@router.post("/{party_id}/archive")
def archive_interested_party(party_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.archive_interested_party(ctx, party_id))


@router.post("/{party_id}/unarchive")
def unarchive_interested_party(party_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.unarchive_interested_party(ctx, party_id))


@router.post("/{party_id}/move")
def move_interested_party(
    party_id: uuid.UUID,
    payload: Dict[str, Any] = Depends(json_or_form),
    direction: Optional[str] = None,
    ctx: ActionContext = Depends(get_action_context),
):
    """Move one slot; direction comes from the body or the query string."""
    return action_response(actions.reorder_interested_party(ctx, party_id, payload.get("direction") or direction))


@router.delete("/{party_id}")
def delete_interested_party(party_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.delete_interested_party(ctx, party_id))
