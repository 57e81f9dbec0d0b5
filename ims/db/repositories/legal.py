"""
Legal register repository functions.

Entries start unapproved; approval and periodic reviews are separate writes.
"""
from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from ims.db import models, schemas
from . import records

MODEL = models.LegalRegisterEntry


def get_entries(db: Session, *, approved: bool | None = None, archived: bool = False):
    query = records.archived_filter(db.query(MODEL), MODEL, archived=archived)
    if approved is not None:
        query = query.filter(MODEL.approved.is_(approved))
    return query.order_by(MODEL.created_at.desc()).all()


def get_entry(db: Session, entry_id: uuid.UUID):
    return records.get_record(db, MODEL, entry_id)


def create_entry(db: Session, data: schemas.LegalRegisterInput, *, actor_id: uuid.UUID):
    entry = MODEL(**data.model_dump(), approved=False, created_by_id=actor_id)
    return records.save(db, entry)


def update_entry(db: Session, entry_id: uuid.UUID, data: schemas.LegalRegisterInput, *, actor_id: uuid.UUID):
    entry = get_entry(db, entry_id)
    if entry is None:
        return None
    records.apply_fields(entry, data.model_dump())
    entry.updated_by_id = actor_id
    return records.save(db, entry)


def approve_entry(db: Session, entry_id: uuid.UUID, *, actor_id: uuid.UUID):
    entry = get_entry(db, entry_id)
    if entry is None:
        return None
    entry.approved = True
    entry.updated_by_id = actor_id
    return records.save(db, entry)


def add_review(db: Session, entry_id: uuid.UUID, data: schemas.LegalReviewInput, *, actor_id: uuid.UUID):
    entry = get_entry(db, entry_id)
    if entry is None:
        return None
    review = models.LegalReview(
        entry_id=entry.id,
        review_date=data.review_date,
        notes=data.notes,
        reviewed_by_id=actor_id,
    )
    db.add(review)
    entry.updated_by_id = actor_id
    db.commit()
    db.refresh(review)
    db.refresh(entry)
    return review


def set_entry_archived(db: Session, entry_id: uuid.UUID, archived: bool, *, actor_id: uuid.UUID):
    entry = get_entry(db, entry_id)
    if entry is None:
        return None
    return records.set_archived(db, entry, archived, actor_id=actor_id)


def delete_entry(db: Session, entry_id: uuid.UUID) -> bool:
    return records.delete_record(db, MODEL, entry_id)
