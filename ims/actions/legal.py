"""
Legal register actions: entries are created unapproved, then approved and
reviewed as separate steps.
"""
from __future__ import annotations

import uuid
from typing import Any

from ims.changelog import ChangeAction, TargetType
from ims.db import schemas
from ims.db.repositories import legal as repo
from ims.errors import NotFound
from ims.utils.role_permissions import PERMISSION_DELETE, PERMISSION_WRITE
from .base import ActionContext, detail_path, parse_input, require_user, run_action, succeed

LIST_PATH = "/legal-register"
TARGET = TargetType.LEGAL_REGISTER


def _out(entry) -> schemas.LegalRegisterEntry:
    return schemas.LegalRegisterEntry.model_validate(entry)


@run_action(ChangeAction.CREATE, TARGET)
def create_entry(ctx: ActionContext, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    payload = parse_input(schemas.LegalRegisterInput, data)
    entry = repo.create_entry(ctx.db, payload, actor_id=user.id)
    return succeed(ctx, action=ChangeAction.CREATE, target_type=TARGET, target_id=entry.id,
                   paths=[LIST_PATH], data=_out(entry), metadata={"title": entry.title})


@run_action(ChangeAction.UPDATE, TARGET)
def update_entry(ctx: ActionContext, record_id: uuid.UUID, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    payload = parse_input(schemas.LegalRegisterInput, data)
    entry = repo.update_entry(ctx.db, record_id, payload, actor_id=user.id)
    if entry is None:
        raise NotFound("Legal register entry not found")
    return succeed(ctx, action=ChangeAction.UPDATE, target_type=TARGET, target_id=entry.id,
                   paths=[LIST_PATH, detail_path(LIST_PATH, entry.id)], data=_out(entry))


@run_action(ChangeAction.APPROVE, TARGET)
def approve_entry(ctx: ActionContext, record_id: uuid.UUID):
    user = require_user(ctx, PERMISSION_WRITE)
    entry = repo.approve_entry(ctx.db, record_id, actor_id=user.id)
    if entry is None:
        raise NotFound("Legal register entry not found")
    return succeed(ctx, action=ChangeAction.APPROVE, target_type=TARGET, target_id=entry.id,
                   paths=[LIST_PATH, detail_path(LIST_PATH, entry.id)], data=_out(entry))


@run_action(ChangeAction.REVIEW, TARGET)
def add_review(ctx: ActionContext, record_id: uuid.UUID, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    payload = parse_input(schemas.LegalReviewInput, data)
    review = repo.add_review(ctx.db, record_id, payload, actor_id=user.id)
    if review is None:
        raise NotFound("Legal register entry not found")
    return succeed(ctx, action=ChangeAction.REVIEW, target_type=TARGET, target_id=record_id,
                   paths=[LIST_PATH, detail_path(LIST_PATH, record_id)],
                   data=schemas.LegalReview.model_validate(review),
                   metadata={"review_date": review.review_date.isoformat()})


def _set_archived(ctx: ActionContext, record_id: uuid.UUID, archived: bool):
    user = require_user(ctx, PERMISSION_WRITE)
    entry = repo.set_entry_archived(ctx.db, record_id, archived, actor_id=user.id)
    if entry is None:
        raise NotFound("Legal register entry not found")
    action = ChangeAction.ARCHIVE if archived else ChangeAction.UNARCHIVE
    return succeed(ctx, action=action, target_type=TARGET, target_id=entry.id,
                   paths=[LIST_PATH], data=_out(entry))


@run_action(ChangeAction.ARCHIVE, TARGET)
def archive_entry(ctx: ActionContext, record_id: uuid.UUID):
    return _set_archived(ctx, record_id, True)


@run_action(ChangeAction.UNARCHIVE, TARGET)
def unarchive_entry(ctx: ActionContext, record_id: uuid.UUID):
    return _set_archived(ctx, record_id, False)


@run_action(ChangeAction.DELETE, TARGET)
def delete_entry(ctx: ActionContext, record_id: uuid.UUID):
    require_user(ctx, PERMISSION_DELETE)
    if not repo.delete_entry(ctx.db, record_id):
        raise NotFound("Legal register entry not found")
    return succeed(ctx, action=ChangeAction.DELETE, target_type=TARGET, target_id=record_id,
                   paths=[LIST_PATH])
