"""
Audit schedule repository functions.

Audits carry their document links (procedures, manuals, registers); saving
with ``create_next_audit`` also schedules the follow-on audit.
"""
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy.orm import Session

from ims.db import models, schemas
from ims.utils.choices import AUDIT_STATUS_NOT_STARTED
from . import records

MODEL = models.Audit

_AUDIT_FIELDS = (
    "title",
    "auditor_id",
    "external_auditor",
    "planned_start_date",
    "actual_start_date",
    "follow_up_date",
    "date_completed",
)


def _field_values(data: schemas.AuditInput) -> dict:
    values = {name: getattr(data, name) for name in _AUDIT_FIELDS}
    values["status"] = data.status.value
    return values


def _document_links(data: schemas.AuditInput):
    return [models.AuditDocument(doc_type=ref.doc_type.value, doc_id=ref.doc_id) for ref in data.document_refs()]


def get_audits(
    db: Session,
    *,
    include_archived: bool = False,
    archived: Optional[bool] = None,
    status: Optional[str] = None,
):
    return records.list_records(
        db,
        MODEL,
        include_archived=include_archived,
        archived=archived,
        filters={"status": status},
        order_by=(MODEL.planned_start_date.asc(), MODEL.created_at.asc()),
    )


def get_audit(db: Session, audit_id: uuid.UUID):
    return records.get_record(db, MODEL, audit_id)


def _schedule_next(db: Session, audit, data: schemas.AuditInput, actor_id: uuid.UUID):
    next_audit = MODEL(
        title=audit.title,
        auditor_id=audit.auditor_id,
        external_auditor=audit.external_auditor,
        planned_start_date=data.next_audit_date,
        status=AUDIT_STATUS_NOT_STARTED,
        created_by_id=actor_id,
    )
    next_audit.audit_documents = _document_links(data)
    db.add(next_audit)
    return next_audit


def create_audit(db: Session, data: schemas.AuditInput, *, actor_id: uuid.UUID):
    """Create an audit; returns ``(audit, next_audit_or_None)``."""
    audit = MODEL(**_field_values(data), created_by_id=actor_id)
    audit.audit_documents = _document_links(data)
    db.add(audit)
    next_audit = _schedule_next(db, audit, data, actor_id) if data.create_next_audit else None
    db.commit()
    db.refresh(audit)
    if next_audit is not None:
        db.refresh(next_audit)
    return audit, next_audit


def update_audit(db: Session, audit_id: uuid.UUID, data: schemas.AuditInput, *, actor_id: uuid.UUID):
    """Replace an audit's editable fields; returns ``(audit, next_audit_or_None)`` or None."""
    audit = get_audit(db, audit_id)
    if audit is None:
        return None
    records.apply_fields(audit, _field_values(data))
    audit.audit_documents = _document_links(data)
    audit.updated_by_id = actor_id
    next_audit = _schedule_next(db, audit, data, actor_id) if data.create_next_audit else None
    db.commit()
    db.refresh(audit)
    if next_audit is not None:
        db.refresh(next_audit)
    return audit, next_audit


def set_audit_archived(db: Session, audit_id: uuid.UUID, archived: bool, *, actor_id: uuid.UUID):
    audit = get_audit(db, audit_id)
    if audit is None:
        return None
    return records.set_archived(db, audit, archived, actor_id=actor_id)


def delete_audit(db: Session, audit_id: uuid.UUID) -> bool:
    return records.delete_record(db, MODEL, audit_id)
