"""
Shared query and write helpers for tracked register records.
"""
from __future__ import annotations

import uuid
from typing import Any, Dict, Iterable, Optional

from sqlalchemy.orm import Session

from ims.db import models


def archived_filter(query, model, *, include_archived: bool = False, archived: Optional[bool] = None):
    """Narrow a query by archive flag.

    ``archived`` selects exactly archived or active rows; otherwise archived
    rows are excluded unless ``include_archived`` is set.
    """
    if archived is not None:
        return query.filter(model.archived.is_(archived))
    if not include_archived:
        return query.filter(model.archived.is_(False))
    return query


def list_records(
    db: Session,
    model,
    *,
    include_archived: bool = False,
    archived: Optional[bool] = None,
    filters: Optional[Dict[str, Any]] = None,
    order_by: Iterable = (),
    skip: int = 0,
    limit: Optional[int] = None,
):
    query = archived_filter(db.query(model), model, include_archived=include_archived, archived=archived)
    for column, value in (filters or {}).items():
        if value is None or value == "" or value == "all":
            continue
        query = query.filter(getattr(model, column) == value)
    for clause in order_by:
        query = query.order_by(clause)
    if skip:
        query = query.offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_record(db: Session, model, record_id: uuid.UUID):
    return db.query(model).filter(model.id == record_id).first()


def apply_fields(record, values: Dict[str, Any]) -> None:
    for key, value in values.items():
        setattr(record, key, value)


def save(db: Session, record):
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def set_archived(db: Session, record, archived: bool, *, actor_id: uuid.UUID):
    record.archived = archived
    record.updated_by_id = actor_id
    return save(db, record)


def delete_record(db: Session, model, record_id: uuid.UUID) -> bool:
    """Hard-delete a record. Returns False when nothing matched."""
    record = get_record(db, model, record_id)
    if record is None:
        return False
    db.delete(record)
    db.commit()
    return True


def user_exists(db: Session, user_id: Optional[uuid.UUID]) -> bool:
    if user_id is None:
        return True
    return db.query(models.User.id).filter(models.User.id == user_id).first() is not None
