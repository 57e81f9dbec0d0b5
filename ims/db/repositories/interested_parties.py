"""
Interested party repository functions.

Risk levels are recomputed from the submitted likelihood/severity pairs on
every write. New parties go to the end of the order; an unarchived party
keeps its old slot unless another party took it meanwhile.
"""
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy.orm import Session

from ims.db import models, ordering, schemas
from ims.risk import score
from ims.utils.choices import ReorderDirection
from . import records

MODEL = models.InterestedParty


def _field_values(data: schemas.InterestedPartyInput) -> dict:
    values = data.model_dump()
    values["risk_level"] = score(data.initial_likelihood, data.initial_severity)
    values["residual_risk_level"] = score(data.residual_likelihood, data.residual_severity)
    return values


def get_interested_parties(db: Session, *, include_archived: bool = False, archived: Optional[bool] = None):
    return records.list_records(
        db,
        MODEL,
        include_archived=include_archived,
        archived=archived,
        order_by=(MODEL.order.asc(), MODEL.created_at.asc()),
    )


def get_interested_party(db: Session, party_id: uuid.UUID):
    return records.get_record(db, MODEL, party_id)


def create_interested_party(db: Session, data: schemas.InterestedPartyInput, *, actor_id: uuid.UUID):
    party = MODEL(
        **_field_values(data),
        order=ordering.next_order(db, MODEL),
        created_by_id=actor_id,
    )
    return records.save(db, party)


def update_interested_party(db: Session, party_id: uuid.UUID, data: schemas.InterestedPartyInput, *, actor_id: uuid.UUID):
    party = get_interested_party(db, party_id)
    if party is None:
        return None
    records.apply_fields(party, _field_values(data))
    party.updated_by_id = actor_id
    return records.save(db, party)


def set_interested_party_archived(db: Session, party_id: uuid.UUID, archived: bool, *, actor_id: uuid.UUID):
    party = get_interested_party(db, party_id)
    if party is None:
        return None
    if party.archived and not archived:
        # Keep its slot unless another party took it while archived
        if ordering.order_taken(db, MODEL, party.order, exclude_id=party.id):
            party.order = ordering.next_order(db, MODEL)
    return records.set_archived(db, party, archived, actor_id=actor_id)


def move_interested_party(db: Session, party_id: uuid.UUID, direction: ReorderDirection | str, *, actor_id: uuid.UUID) -> bool:
    """Move a party one slot up or down in a single transaction.

    Returns False (after committing nothing) when the party is already at the
    boundary in that direction.
    """
    try:
        moved = ordering.move(db, MODEL, party_id, direction)
        if moved:
            party = get_interested_party(db, party_id)
            party.updated_by_id = actor_id
            db.commit()
        else:
            db.rollback()
        return moved
    except Exception:
        db.rollback()
        raise


def delete_interested_party(db: Session, party_id: uuid.UUID) -> bool:
    return records.delete_record(db, MODEL, party_id)
