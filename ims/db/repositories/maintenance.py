"""
Maintenance and calibration schedule repository functions.
"""
from __future__ import annotations

import uuid
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ims.db import models, schemas
from ims.utils.choices import MAINTENANCE_CATEGORY_CALIBRATION, MAINTENANCE_CATEGORY_MAINTENANCE
from . import records

MODEL = models.MaintenanceItem

STATUS_COMPLETED = "completed"
STATUS_PENDING = "pending"


def get_items(
    db: Session,
    *,
    archived: bool = False,
    category: Optional[str] = None,
    sub_category: Optional[str] = None,
    status: Optional[str] = None,
    owner_id: Optional[uuid.UUID] = None,
    allocated_to_id: Optional[uuid.UUID] = None,
):
    query = records.archived_filter(db.query(MODEL), MODEL, archived=archived)
    if category and category != "all":
        query = query.filter(MODEL.category == category)
    if sub_category and sub_category != "all":
        query = query.filter(MODEL.sub_category == sub_category)
    if status == STATUS_COMPLETED:
        query = query.filter(MODEL.completed.is_(True))
    elif status == STATUS_PENDING:
        query = query.filter(MODEL.completed.is_(False))
    if owner_id is not None:
        query = query.filter(MODEL.owner_id == owner_id)
    if allocated_to_id is not None:
        query = query.filter(MODEL.allocated_to_id == allocated_to_id)
    return query.order_by(MODEL.due_date.asc()).all()


def split_items(items) -> Dict[str, List]:
    """Group items into open/closed maintenance and calibration lists."""
    groups: Dict[str, List] = {
        "maintenance_items": [],
        "closed_maintenance_items": [],
        "calibration_items": [],
        "closed_calibration_items": [],
    }
    for item in items:
        prefix = "closed_" if item.completed else ""
        if item.category == MAINTENANCE_CATEGORY_CALIBRATION:
            groups[f"{prefix}calibration_items"].append(item)
        elif item.category == MAINTENANCE_CATEGORY_MAINTENANCE:
            groups[f"{prefix}maintenance_items"].append(item)
    return groups


def get_sub_categories(db: Session) -> List[str]:
    rows = (
        db.query(MODEL.sub_category)
        .filter(MODEL.sub_category.isnot(None), MODEL.sub_category != "")
        .distinct()
        .order_by(MODEL.sub_category.asc())
        .all()
    )
    return [row[0] for row in rows]


def get_item(db: Session, item_id: uuid.UUID):
    return records.get_record(db, MODEL, item_id)


def _field_values(data: schemas.MaintenanceItemInput) -> dict:
    values = data.model_dump()
    values["category"] = data.category.value
    return values


def create_item(db: Session, data: schemas.MaintenanceItemInput, *, actor_id: uuid.UUID):
    item = MODEL(**_field_values(data), created_by_id=actor_id)
    return records.save(db, item)


def update_item(db: Session, item_id: uuid.UUID, data: schemas.MaintenanceItemInput, *, actor_id: uuid.UUID):
    item = get_item(db, item_id)
    if item is None:
        return None
    records.apply_fields(item, _field_values(data))
    item.updated_by_id = actor_id
    return records.save(db, item)


def set_item_archived(db: Session, item_id: uuid.UUID, archived: bool, *, actor_id: uuid.UUID):
    item = get_item(db, item_id)
    if item is None:
        return None
    return records.set_archived(db, item, archived, actor_id=actor_id)


def delete_item(db: Session, item_id: uuid.UUID) -> bool:
    return records.delete_record(db, MODEL, item_id)
