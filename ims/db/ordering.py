"""
Single-step reordering over an integer ``order`` column.

`move` swaps the record with the non-archived neighbour one slot up or down.
The read and both writes run inside the caller's transaction with the rows
locked (``SELECT ... FOR UPDATE`` on PostgreSQL), so two concurrent moves on
the same pair cannot leave duplicate order values. Moving past either end
finds no neighbour and is a successful no-op.
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session

from ims.errors import NotFound, ValidationFailure
from ims.utils.choices import ReorderDirection

logger = logging.getLogger(__name__)


def target_order(current: int, direction: ReorderDirection | str) -> int:
    """Return the order slot a record moves into."""
    try:
        direction = ReorderDirection(direction)
    except ValueError:
        raise ValidationFailure(f"Invalid direction: {direction!r}. Expected 'up' or 'down'")
    return current - 1 if direction == ReorderDirection.up else current + 1


def next_order(db: Session, model) -> int:
    """Order value that places a record after every non-archived sibling."""
    current_max = db.query(func.max(model.order)).filter(model.archived.is_(False)).scalar()
    return (current_max or 0) + 1


def order_taken(db: Session, model, order: int, *, exclude_id: uuid.UUID) -> bool:
    """Whether another non-archived record already holds ``order``."""
    holder = (
        db.query(model.id)
        .filter(model.order == order, model.archived.is_(False), model.id != exclude_id)
        .first()
    )
    return holder is not None


def move(db: Session, model, record_id: uuid.UUID, direction: ReorderDirection | str) -> bool:
    """Swap a record's order with its neighbour in ``direction``.

    Returns True when a swap happened and False at a boundary. Flushes but
    does not commit; the caller owns the transaction.
    """
    record = (
        db.query(model)
        .filter(model.id == record_id)
        .with_for_update(of=model)
        .populate_existing()
        .first()
    )
    if record is None:
        raise NotFound(f"{model.__name__} {record_id} not found")
    if record.archived:
        raise ValidationFailure("Archived records cannot be reordered")

    current = record.order
    new_order = target_order(current, direction)
    neighbour = (
        db.query(model)
        .filter(
            model.order == new_order,
            model.archived.is_(False),
            model.id != record.id,
        )
        .with_for_update(of=model)
        .populate_existing()
        .first()
    )
    if neighbour is None:
        logger.info("reorder_noop: %s %s already at boundary (order=%s)", model.__name__, record_id, current)
        return False

    neighbour.order = current
    record.order = new_order
    db.flush()
    return True
