"""
Maintenance and calibration schedule actions.
"""
from __future__ import annotations

import uuid
from typing import Any

from ims.changelog import ChangeAction, TargetType
from ims.db import schemas
from ims.db.repositories import documents as documents_repo
from ims.db.repositories import maintenance as repo
from ims.db.repositories.records import user_exists
from ims.errors import NotFound, ValidationFailure
from ims.utils.role_permissions import PERMISSION_DELETE, PERMISSION_WRITE
from .base import ActionContext, detail_path, parse_input, require_user, run_action, succeed

LIST_PATH = "/maintenance"
TARGET = TargetType.MAINTENANCE_ITEM


def _out(item) -> schemas.MaintenanceItem:
    return schemas.MaintenanceItem.model_validate(item)


def _validated(ctx: ActionContext, data: Any) -> schemas.MaintenanceItemInput:
    payload = parse_input(schemas.MaintenanceItemInput, data)
    for label, user_id in (("Owner", payload.owner_id), ("Allocated user", payload.allocated_to_id)):
        if not user_exists(ctx.db, user_id):
            raise ValidationFailure(f"{label} does not exist")
    return payload


@run_action(ChangeAction.CREATE, TARGET)
def create_item(ctx: ActionContext, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    item = repo.create_item(ctx.db, _validated(ctx, data), actor_id=user.id)
    return succeed(ctx, action=ChangeAction.CREATE, target_type=TARGET, target_id=item.id,
                   paths=[LIST_PATH], data=_out(item), metadata={"category": item.category})


@run_action(ChangeAction.UPDATE, TARGET)
def update_item(ctx: ActionContext, record_id: uuid.UUID, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    item = repo.update_item(ctx.db, record_id, _validated(ctx, data), actor_id=user.id)
    if item is None:
        raise NotFound("Maintenance item not found")
    return succeed(ctx, action=ChangeAction.UPDATE, target_type=TARGET, target_id=item.id,
                   paths=[LIST_PATH, detail_path(LIST_PATH, item.id)], data=_out(item))


def _set_archived(ctx: ActionContext, record_id: uuid.UUID, archived: bool):
    user = require_user(ctx, PERMISSION_WRITE)
    item = repo.set_item_archived(ctx.db, record_id, archived, actor_id=user.id)
    if item is None:
        raise NotFound("Maintenance item not found")
    action = ChangeAction.ARCHIVE if archived else ChangeAction.UNARCHIVE
    return succeed(ctx, action=action, target_type=TARGET, target_id=item.id,
                   paths=[LIST_PATH], data=_out(item))


@run_action(ChangeAction.ARCHIVE, TARGET)
def archive_item(ctx: ActionContext, record_id: uuid.UUID):
    return _set_archived(ctx, record_id, True)


@run_action(ChangeAction.UNARCHIVE, TARGET)
def unarchive_item(ctx: ActionContext, record_id: uuid.UUID):
    return _set_archived(ctx, record_id, False)


@run_action(ChangeAction.TOGGLE_ARCHIVE, TARGET)
def toggle_archive_item(ctx: ActionContext, record_id: uuid.UUID):
    require_user(ctx, PERMISSION_WRITE)
    item = repo.get_item(ctx.db, record_id)
    if item is None:
        raise NotFound("Maintenance item not found")
    return _set_archived(ctx, record_id, not item.archived)


@run_action(ChangeAction.DELETE, TARGET)
def delete_item(ctx: ActionContext, record_id: uuid.UUID):
    require_user(ctx, PERMISSION_DELETE)
    if not repo.delete_item(ctx.db, record_id):
        raise NotFound("Maintenance item not found")
    return succeed(ctx, action=ChangeAction.DELETE, target_type=TARGET, target_id=record_id,
                   paths=[LIST_PATH])


@run_action(ChangeAction.DOCUMENT_ATTACH, TARGET)
def attach_document(ctx: ActionContext, record_id: uuid.UUID, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    payload = parse_input(schemas.DocumentCreate, data)
    if repo.get_item(ctx.db, record_id) is None:
        raise NotFound("Maintenance item not found")
    document = documents_repo.attach_document(ctx.db, payload, uploaded_by_id=user.id, maintenance_item_id=record_id)
    return succeed(ctx, action=ChangeAction.DOCUMENT_ATTACH, target_type=TARGET, target_id=record_id,
                   paths=[detail_path(LIST_PATH, record_id)],
                   data=schemas.Document.model_validate(document),
                   metadata={"document_id": str(document.id), "filename": document.filename})
