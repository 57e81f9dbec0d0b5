"""
Document attachment repository functions.

Only metadata is stored here; file bytes live in external storage.
"""
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy.orm import Session

from ims.db import models, schemas


def attach_document(
    db: Session,
    data: schemas.DocumentCreate,
    *,
    uploaded_by_id: uuid.UUID,
    maintenance_item_id: Optional[uuid.UUID] = None,
    audit_id: Optional[uuid.UUID] = None,
):
    if (maintenance_item_id is None) == (audit_id is None):
        raise ValueError("A document belongs to exactly one maintenance item or audit")
    document = models.Document(
        **data.model_dump(),
        uploaded_by_id=uploaded_by_id,
        maintenance_item_id=maintenance_item_id,
        audit_id=audit_id,
    )
    db.add(document)
    db.commit()
    db.refresh(document)
    return document


def get_document(db: Session, document_id: uuid.UUID):
    return db.query(models.Document).filter(models.Document.id == document_id).first()


def get_documents(
    db: Session,
    *,
    maintenance_item_id: Optional[uuid.UUID] = None,
    audit_id: Optional[uuid.UUID] = None,
):
    query = db.query(models.Document)
    if maintenance_item_id is not None:
        query = query.filter(models.Document.maintenance_item_id == maintenance_item_id)
    if audit_id is not None:
        query = query.filter(models.Document.audit_id == audit_id)
    return query.order_by(models.Document.created_at.desc()).all()


def delete_document(db: Session, document_id: uuid.UUID) -> bool:
    document = get_document(db, document_id)
    if document is None:
        return False
    db.delete(document)
    db.commit()
    return True
