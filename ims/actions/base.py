"""
Shared plumbing for register actions: the acting context, permission checks
and the failure boundary that turns errors into ``ActionResult`` values.
"""
from __future__ import annotations

import functools
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ims import changelog
from ims.changelog import ChangeAction, TargetType
from ims.db import models
from ims.db.schemas import ActionResult
from ims.errors import Forbidden, RecordsError, StorageFailure, Unauthorized, ValidationFailure
from ims.invalidation import invalidate as default_invalidate
from ims.api.permissions import has_permission

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)


@dataclass
class ActionContext:
    """Request-scoped collaborators handed to every action."""
    db: Session
    user: Optional[models.User] = None
    invalidate: Callable[[str], None] = field(default=default_invalidate)

    @property
    def actor_id(self) -> Optional[uuid.UUID]:
        return self.user.id if self.user is not None else None


def require_user(ctx: ActionContext, permission: str) -> models.User:
    """Return the acting user or raise Unauthorized/Forbidden."""
    if ctx.user is None:
        raise Unauthorized("Authentication required")
    if not has_permission(ctx.user, permission):
        raise Forbidden(f"You do not have {permission} permission")
    return ctx.user


def parse_input(schema: Type[InputT], data: Any) -> InputT:
    """Coerce raw mappings into a validated input struct."""
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        messages = []
        for err in exc.errors():
            loc = ".".join(str(part) for part in err.get("loc", ()) if part != "__root__")
            msg = err.get("msg", "invalid value")
            messages.append(f"{loc}: {msg}" if loc else msg)
        raise ValidationFailure("; ".join(messages) or "Invalid input") from exc


def detail_path(list_path: str, record_id: uuid.UUID) -> str:
    return f"{list_path}/{record_id}"


def succeed(
    ctx: ActionContext,
    *,
    action: ChangeAction,
    target_type: TargetType,
    target_id: Optional[uuid.UUID],
    paths: Iterable[str],
    data: Any = None,
    metadata: Optional[dict] = None,
) -> ActionResult:
    """Record the change, invalidate the affected routes and build the result."""
    try:
        changelog.log(
            ctx.db,
            action=action,
            target_type=target_type,
            target_id=target_id,
            actor_user_id=ctx.actor_id,
            metadata=metadata,
        )
    except SQLAlchemyError as exc:
        # The mutation itself is already committed
        ctx.db.rollback()
        logger.warning("change log write failed for %s %s: %s", target_type.value, target_id, exc)
    for path in paths:
        ctx.invalidate(path)
    return ActionResult.ok(data=data, id=target_id)


def _record_failure(ctx, action, target_type, target_id, error: RecordsError) -> None:
    if ctx.user is None:
        return
    try:
        changelog.log_failure(
            ctx.db,
            action=action,
            target_type=target_type,
            target_id=target_id,
            actor_user_id=ctx.user.id,
            reason=error.message,
        )
    except SQLAlchemyError as exc:
        ctx.db.rollback()
        logger.warning("change log failure row not written: %s", exc)


def run_action(action: ChangeAction, target_type: TargetType):
    """Decorate an action so errors come back as a failed ``ActionResult``.

    The wrapped function takes ``(ctx, ...)``; a ``record_id`` argument, when
    present, is used as the change log target.
    """
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(ctx: ActionContext, *args, **kwargs) -> ActionResult:
            target_id = kwargs.get("record_id")
            if target_id is None and args and isinstance(args[0], uuid.UUID):
                target_id = args[0]
            try:
                return fn(ctx, *args, **kwargs)
            except RecordsError as exc:
                error = exc
                logger.info("%s %s rejected: %s (%s)", action.value, target_type.value, exc.message, exc.code)
            except SQLAlchemyError as exc:
                error = StorageFailure()
                logger.exception("%s %s failed in storage: %s", action.value, target_type.value, exc)
            ctx.db.rollback()
            _record_failure(ctx, action, target_type, target_id, error)
            return ActionResult.failure(error.message, error.code)
        return wrapper
    return decorator
