"""
Change log repository functions.

Implements create and query functions for change log entries.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy.orm import Session

from ims.db import schemas, models


def create_entry(db: Session, entry: schemas.ChangeLogCreate, actor_user_id: uuid.UUID):
    data = entry.model_dump()
    metadata_payload = data.pop('metadata', None)
    db_entry = models.ChangeLogEntry(
        **data,
        actor_user_id=actor_user_id,
        metadata_json=metadata_payload,
    )
    db.add(db_entry)
    db.commit()
    db.refresh(db_entry)
    return db_entry


def get_entries(
    db: Session,
    user_id: Optional[uuid.UUID] = None,
    action_type: Optional[str] = None,
    target_type: Optional[str] = None,
    target_id: Optional[uuid.UUID] = None,
    status: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
):
    query = db.query(models.ChangeLogEntry)
    if user_id:
        query = query.filter(models.ChangeLogEntry.actor_user_id == user_id)
    if action_type:
        query = query.filter(models.ChangeLogEntry.action_type == action_type)
    if target_type:
        query = query.filter(models.ChangeLogEntry.target_type == target_type)
    if target_id:
        query = query.filter(models.ChangeLogEntry.target_id == target_id)
    if status:
        query = query.filter(models.ChangeLogEntry.status == status)
    return query.order_by(models.ChangeLogEntry.created_at.desc()).offset(skip).limit(limit).all()
