"""
Improvement register repository functions.

Implements create/read/update/delete plus the open/completed split and the
sequential reference number.
"""
from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ims.db import models, schemas
from . import records

MODEL = models.ImprovementRecord


def latest_number(db: Session) -> Optional[int]:
    return db.query(func.max(MODEL.number)).scalar()


def get_improvements(
    db: Session,
    *,
    completed: Optional[bool] = None,
    archived: bool = False,
    category: Optional[str] = None,
    type: Optional[str] = None,
    root_cause_type: Optional[str] = None,
):
    """List improvements, newest reference first.

    ``completed`` narrows to records with (True) or without (False) a
    completion date; ``archived`` picks the archived or the active view.
    """
    query = records.archived_filter(db.query(MODEL), MODEL, archived=archived)
    if completed is True:
        query = query.filter(MODEL.date_completed.isnot(None))
    elif completed is False:
        query = query.filter(MODEL.date_completed.is_(None))
    for column, value in (("category", category), ("type", type), ("root_cause_type", root_cause_type)):
        if value and value != "all":
            query = query.filter(getattr(MODEL, column) == value)
    return query.order_by(MODEL.number.desc()).all()


def get_improvement(db: Session, improvement_id: uuid.UUID):
    return records.get_record(db, MODEL, improvement_id)


def create_improvement(db: Session, data: schemas.ImprovementInput, *, actor_id: uuid.UUID):
    values = data.model_dump()
    values["date_raised"] = values.get("date_raised") or date.today()
    improvement = MODEL(
        **values,
        number=(latest_number(db) or 0) + 1,
        created_by_id=actor_id,
    )
    return records.save(db, improvement)


def update_improvement(db: Session, improvement_id: uuid.UUID, data: schemas.ImprovementInput, *, actor_id: uuid.UUID):
    improvement = get_improvement(db, improvement_id)
    if improvement is None:
        return None
    values = data.model_dump()
    values["date_raised"] = values.get("date_raised") or improvement.date_raised
    records.apply_fields(improvement, values)
    improvement.updated_by_id = actor_id
    return records.save(db, improvement)


def set_improvement_archived(db: Session, improvement_id: uuid.UUID, archived: bool, *, actor_id: uuid.UUID):
    improvement = get_improvement(db, improvement_id)
    if improvement is None:
        return None
    return records.set_archived(db, improvement, archived, actor_id=actor_id)


def delete_improvement(db: Session, improvement_id: uuid.UUID) -> bool:
    return records.delete_record(db, MODEL, improvement_id)
