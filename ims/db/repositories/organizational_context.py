"""
Organisational context repository functions.
"""
from __future__ import annotations

import uuid
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ims.db import models, schemas
from ims.risk import score
from . import records

MODEL = models.OrganizationalContextEntry


def _field_values(data: schemas.OrganizationalContextInput) -> dict:
    values = data.model_dump()
    values["initial_risk_level"] = score(data.initial_likelihood, data.initial_severity)
    values["residual_risk_level"] = score(data.residual_likelihood, data.residual_severity)
    return values


def get_entries(
    db: Session,
    *,
    include_archived: bool = False,
    category: Optional[str] = None,
):
    return records.list_records(
        db,
        MODEL,
        include_archived=include_archived,
        filters={"category": category},
        order_by=(MODEL.created_at.desc(),),
    )


def group_by_category(entries) -> Dict[str, List]:
    grouped: Dict[str, List] = {}
    for entry in entries:
        grouped.setdefault(entry.category, []).append(entry)
    return {category: grouped[category] for category in sorted(grouped)}


def get_entry(db: Session, entry_id: uuid.UUID):
    return records.get_record(db, MODEL, entry_id)


def create_entry(db: Session, data: schemas.OrganizationalContextInput, *, actor_id: uuid.UUID):
    entry = MODEL(**_field_values(data), created_by_id=actor_id)
    return records.save(db, entry)


def update_entry(db: Session, entry_id: uuid.UUID, data: schemas.OrganizationalContextInput, *, actor_id: uuid.UUID):
    entry = get_entry(db, entry_id)
    if entry is None:
        return None
    records.apply_fields(entry, _field_values(data))
    entry.updated_by_id = actor_id
    return records.save(db, entry)


def set_entry_archived(db: Session, entry_id: uuid.UUID, archived: bool, *, actor_id: uuid.UUID):
    entry = get_entry(db, entry_id)
    if entry is None:
        return None
    return records.set_archived(db, entry, archived, actor_id=actor_id)


def delete_entry(db: Session, entry_id: uuid.UUID) -> bool:
    return records.delete_record(db, MODEL, entry_id)
