"""
Change log helpers and enums.

Every register mutation, successful or not, is persisted as one normalized
change log row; wrappers below cover the common target types.
"""
from __future__ import annotations
import uuid
from enum import Enum
from typing import Any, Optional, Dict
from sqlalchemy.orm import Session

from ims.db import schemas
from ims.db.repositories import changelog as changelog_repo


class ChangeAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    ARCHIVE = "archive"
    UNARCHIVE = "unarchive"
    # Failure rows of a toggle whose direction was never resolved
    TOGGLE_ARCHIVE = "toggle_archive"
    # Interested parties
    REORDER = "reorder"
    # Legal register
    APPROVE = "approve"
    REVIEW = "review"
    # Attachments
    DOCUMENT_ATTACH = "document_attach"
    DOCUMENT_DELETE = "document_delete"
    # Users
    USER_UPDATE = "user_update"


class ChangeStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class TargetType(str, Enum):
    AUDIT = "audit"
    IMPROVEMENT = "improvement"
    INTERESTED_PARTY = "interested_party"
    ORGANIZATIONAL_CONTEXT = "organizational_context"
    MAINTENANCE_ITEM = "maintenance_item"
    LEGAL_REGISTER = "legal_register"
    DOCUMENT = "document"
    USER = "user"


def _value(item) -> str:
    # Persist plain strings, never Enum reprs
    return item.value if isinstance(item, Enum) else str(item)


def log(
    db: Session,
    *,
    action: ChangeAction | str,
    status: ChangeStatus | str = ChangeStatus.SUCCESS,
    target_type: TargetType | str,
    target_id: Optional[uuid.UUID] = None,
    actor_user_id: uuid.UUID,
    reason: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
):
    """Persist one change log row and return it."""
    entry = schemas.ChangeLogCreate(
        action_type=_value(action),
        status=_value(status),
        target_type=_value(target_type),
        target_id=target_id,
        reason=reason,
        metadata=metadata or {},
    )
    return changelog_repo.create_entry(db, entry, actor_user_id=actor_user_id)


def log_failure(
    db: Session,
    *,
    action: ChangeAction | str,
    target_type: TargetType | str,
    target_id: Optional[uuid.UUID],
    actor_user_id: uuid.UUID,
    reason: str,
):
    return log(
        db,
        action=action,
        status=ChangeStatus.FAILURE,
        target_type=target_type,
        target_id=target_id,
        actor_user_id=actor_user_id,
        reason=reason,
    )


__all__ = ["ChangeAction", "ChangeStatus", "TargetType", "log", "log_failure"]
