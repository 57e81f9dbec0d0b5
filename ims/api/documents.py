"""
Document metadata endpoints.
"""
from typing import List, Optional
import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ims.actions import documents as actions
from ims.actions.base import ActionContext
from ims.api.deps import get_action_context, require_read
from ims.api.responses import action_response
from ims.db import schemas
from ims.db.database import get_db
from ims.db.repositories import documents as repo

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=List[schemas.Document])
def list_documents(
    audit_id: Optional[uuid.UUID] = None,
    maintenance_item_id: Optional[uuid.UUID] = None,
    db: Session = Depends(get_db),
    _user=Depends(require_read),
):
    """Attachment metadata, newest first, optionally for one audit or maintenance item."""
    return repo.get_documents(db, audit_id=audit_id, maintenance_item_id=maintenance_item_id)


@router.get("/{document_id}", response_model=schemas.Document)
def get_document(document_id: uuid.UUID, db: Session = Depends(get_db), _user=Depends(require_read)):
    document = repo.get_document(db, document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return document


@router.delete("/{document_id}")
def delete_document(document_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.delete_document(ctx, document_id))
