"""
Audit schedule API endpoints.
"""
from typing import Any, Dict, List, Optional
import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ims.actions import audits as actions
from ims.actions.base import ActionContext
from ims.api.deps import get_action_context, require_read
from ims.api.intake import body_payload, json_or_form
from ims.api.responses import action_response
from ims.db import schemas
from ims.db.database import get_db
from ims.db.repositories import audits as repo
from ims.utils.choices import AUDIT_DOCUMENT_OPTIONS

router = APIRouter(prefix="/audit-schedule", tags=["audit-schedule"])

audit_payload = body_payload("procedures", "manuals", "registers")


@router.get("", response_model=List[schemas.Audit])
def list_audits(
    show_archived: bool = False,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    _user=Depends(require_read),
):
    return repo.get_audits(db, archived=show_archived, status=status)


@router.get("/document-options")
def get_document_options(_user=Depends(require_read)) -> Dict[str, List[str]]:
    """Procedures, manuals and registers an audit can cover."""
    return {doc_type: list(options) for doc_type, options in AUDIT_DOCUMENT_OPTIONS.items()}


@router.get("/{audit_id}", response_model=schemas.AuditDetail)
def get_audit(audit_id: uuid.UUID, db: Session = Depends(get_db), _user=Depends(require_read)):
    audit = repo.get_audit(db, audit_id)
    if audit is None:
        raise HTTPException(status_code=404, detail="Audit not found")
    return audit


@router.post("")
def create_audit(payload: Dict[str, Any] = Depends(audit_payload), ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.create_audit(ctx, payload), success_status=201)


@router.put("/{audit_id}")
def update_audit(
    audit_id: uuid.UUID,
    payload: Dict[str, Any] = Depends(audit_payload),
    ctx: ActionContext = Depends(get_action_context),
):
    return action_response(actions.update_audit(ctx, audit_id, payload))


@router.post("/{audit_id}/archive")
def archive_audit(audit_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.archive_audit(ctx, audit_id))


@router.post("/{audit_id}/unarchive")
def unarchive_audit(audit_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.unarchive_audit(ctx, audit_id))


@router.post("/{audit_id}/documents")
def attach_audit_document(
    audit_id: uuid.UUID,
    payload: Dict[str, Any] = Depends(json_or_form),
    ctx: ActionContext = Depends(get_action_context),
):
    return action_response(actions.attach_document(ctx, audit_id, payload), success_status=201)


@router.delete("/{audit_id}")
def delete_audit(audit_id: uuid.UUID, ctx: ActionContext = Depends(get_action_context)):
    return action_response(actions.delete_audit(ctx, audit_id))
