"""
Improvement register actions.
"""
from __future__ import annotations

import uuid
from typing import Any

from ims.changelog import ChangeAction, TargetType
from ims.db import schemas
from ims.db.repositories import improvements as repo
from ims.db.repositories.records import user_exists
from ims.errors import NotFound, ValidationFailure
from ims.utils.role_permissions import PERMISSION_DELETE, PERMISSION_WRITE
from .base import ActionContext, detail_path, parse_input, require_user, run_action, succeed

LIST_PATH = "/improvement-register"
TARGET = TargetType.IMPROVEMENT


def _out(improvement) -> schemas.Improvement:
    return schemas.Improvement.model_validate(improvement)


def _validated(ctx: ActionContext, data: Any) -> schemas.ImprovementInput:
    payload = parse_input(schemas.ImprovementInput, data)
    if not user_exists(ctx.db, payload.internal_owner_id):
        raise ValidationFailure("Internal owner does not exist")
    return payload


@run_action(ChangeAction.CREATE, TARGET)
def create_improvement(ctx: ActionContext, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    improvement = repo.create_improvement(ctx.db, _validated(ctx, data), actor_id=user.id)
    return succeed(ctx, action=ChangeAction.CREATE, target_type=TARGET, target_id=improvement.id,
                   paths=[LIST_PATH], data=_out(improvement), metadata={"number": improvement.number})


@run_action(ChangeAction.UPDATE, TARGET)
def update_improvement(ctx: ActionContext, record_id: uuid.UUID, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    improvement = repo.update_improvement(ctx.db, record_id, _validated(ctx, data), actor_id=user.id)
    if improvement is None:
        raise NotFound("Improvement not found")
    return succeed(ctx, action=ChangeAction.UPDATE, target_type=TARGET, target_id=improvement.id,
                   paths=[LIST_PATH, detail_path(LIST_PATH, improvement.id)], data=_out(improvement))


def _set_archived(ctx: ActionContext, record_id: uuid.UUID, archived: bool):
    user = require_user(ctx, PERMISSION_WRITE)
    improvement = repo.set_improvement_archived(ctx.db, record_id, archived, actor_id=user.id)
    if improvement is None:
        raise NotFound("Improvement not found")
    action = ChangeAction.ARCHIVE if archived else ChangeAction.UNARCHIVE
    return succeed(ctx, action=action, target_type=TARGET, target_id=improvement.id,
                   paths=[LIST_PATH], data=_out(improvement))


@run_action(ChangeAction.ARCHIVE, TARGET)
def archive_improvement(ctx: ActionContext, record_id: uuid.UUID):
    return _set_archived(ctx, record_id, True)


@run_action(ChangeAction.UNARCHIVE, TARGET)
def restore_improvement(ctx: ActionContext, record_id: uuid.UUID):
    return _set_archived(ctx, record_id, False)


unarchive_improvement = restore_improvement


@run_action(ChangeAction.DELETE, TARGET)
def delete_improvement(ctx: ActionContext, record_id: uuid.UUID):
    require_user(ctx, PERMISSION_DELETE)
    if not repo.delete_improvement(ctx.db, record_id):
        raise NotFound("Improvement not found")
    return succeed(ctx, action=ChangeAction.DELETE, target_type=TARGET, target_id=record_id,
                   paths=[LIST_PATH])
