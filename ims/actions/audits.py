"""
Audit schedule actions.

Saving an audit with ``create_next_audit`` schedules the next one in the
same write; both appear in the result.
"""
from __future__ import annotations

import uuid
from typing import Any

from ims.changelog import ChangeAction, TargetType
from ims.db import schemas
from ims.db.repositories import audits as repo
from ims.db.repositories import documents as documents_repo
from ims.db.repositories.records import user_exists
from ims.errors import NotFound, ValidationFailure
from ims.utils.role_permissions import PERMISSION_DELETE, PERMISSION_WRITE
from .base import ActionContext, detail_path, parse_input, require_user, run_action, succeed

LIST_PATH = "/audit-schedule"
TARGET = TargetType.AUDIT


def _out(audit) -> schemas.Audit:
    return schemas.Audit.model_validate(audit)


def _validated(ctx: ActionContext, data: Any) -> schemas.AuditInput:
    payload = parse_input(schemas.AuditInput, data)
    if not user_exists(ctx.db, payload.auditor_id):
        raise ValidationFailure("Auditor does not exist")
    return payload


def _saved(audit, next_audit) -> schemas.AuditSaveResult:
    return schemas.AuditSaveResult(
        audit=_out(audit),
        next_audit=_out(next_audit) if next_audit is not None else None,
    )


def _next_meta(next_audit):
    return {"next_audit_id": str(next_audit.id)} if next_audit is not None else None


@run_action(ChangeAction.CREATE, TARGET)
def create_audit(ctx: ActionContext, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    audit, next_audit = repo.create_audit(ctx.db, _validated(ctx, data), actor_id=user.id)
    return succeed(ctx, action=ChangeAction.CREATE, target_type=TARGET, target_id=audit.id,
                   paths=[LIST_PATH], data=_saved(audit, next_audit), metadata=_next_meta(next_audit))


@run_action(ChangeAction.UPDATE, TARGET)
def update_audit(ctx: ActionContext, record_id: uuid.UUID, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    saved = repo.update_audit(ctx.db, record_id, _validated(ctx, data), actor_id=user.id)
    if saved is None:
        raise NotFound("Audit not found")
    audit, next_audit = saved
    return succeed(ctx, action=ChangeAction.UPDATE, target_type=TARGET, target_id=audit.id,
                   paths=[LIST_PATH, detail_path(LIST_PATH, audit.id)],
                   data=_saved(audit, next_audit), metadata=_next_meta(next_audit))


def _set_archived(ctx: ActionContext, record_id: uuid.UUID, archived: bool):
    user = require_user(ctx, PERMISSION_WRITE)
    audit = repo.set_audit_archived(ctx.db, record_id, archived, actor_id=user.id)
    if audit is None:
        raise NotFound("Audit not found")
    action = ChangeAction.ARCHIVE if archived else ChangeAction.UNARCHIVE
    return succeed(ctx, action=action, target_type=TARGET, target_id=audit.id,
                   paths=[LIST_PATH], data=_out(audit))


@run_action(ChangeAction.ARCHIVE, TARGET)
def archive_audit(ctx: ActionContext, record_id: uuid.UUID):
    return _set_archived(ctx, record_id, True)


@run_action(ChangeAction.UNARCHIVE, TARGET)
def unarchive_audit(ctx: ActionContext, record_id: uuid.UUID):
    return _set_archived(ctx, record_id, False)


@run_action(ChangeAction.DELETE, TARGET)
def delete_audit(ctx: ActionContext, record_id: uuid.UUID):
    require_user(ctx, PERMISSION_DELETE)
    if not repo.delete_audit(ctx.db, record_id):
        raise NotFound("Audit not found")
    return succeed(ctx, action=ChangeAction.DELETE, target_type=TARGET, target_id=record_id,
                   paths=[LIST_PATH])


@run_action(ChangeAction.DOCUMENT_ATTACH, TARGET)
def attach_document(ctx: ActionContext, record_id: uuid.UUID, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    payload = parse_input(schemas.DocumentCreate, data)
    if repo.get_audit(ctx.db, record_id) is None:
        raise NotFound("Audit not found")
    document = documents_repo.attach_document(ctx.db, payload, uploaded_by_id=user.id, audit_id=record_id)
    return succeed(ctx, action=ChangeAction.DOCUMENT_ATTACH, target_type=TARGET, target_id=record_id,
                   paths=[detail_path(LIST_PATH, record_id)],
                   data=schemas.Document.model_validate(document),
                   metadata={"document_id": str(document.id), "filename": document.filename})
