"""
Interested party actions, including the single-step reorder.
"""
from __future__ import annotations

import uuid
from typing import Any

from ims.changelog import ChangeAction, TargetType
from ims.db import schemas
from ims.db.repositories import interested_parties as repo
from ims.errors import NotFound
from ims.utils.role_permissions import PERMISSION_DELETE, PERMISSION_WRITE
from .base import ActionContext, detail_path, parse_input, require_user, run_action, succeed

LIST_PATH = "/interested-parties"
TARGET = TargetType.INTERESTED_PARTY


def _out(party) -> schemas.InterestedParty:
    return schemas.InterestedParty.model_validate(party)


@run_action(ChangeAction.CREATE, TARGET)
def create_interested_party(ctx: ActionContext, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    payload = parse_input(schemas.InterestedPartyInput, data)
    party = repo.create_interested_party(ctx.db, payload, actor_id=user.id)
    return succeed(ctx, action=ChangeAction.CREATE, target_type=TARGET, target_id=party.id,
                   paths=[LIST_PATH], data=_out(party), metadata={"name": party.name})


@run_action(ChangeAction.UPDATE, TARGET)
def update_interested_party(ctx: ActionContext, record_id: uuid.UUID, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    payload = parse_input(schemas.InterestedPartyInput, data)
    party = repo.update_interested_party(ctx.db, record_id, payload, actor_id=user.id)
    if party is None:
        raise NotFound("Interested party not found")
    return succeed(ctx, action=ChangeAction.UPDATE, target_type=TARGET, target_id=party.id,
                   paths=[LIST_PATH, detail_path(LIST_PATH, party.id)], data=_out(party))


def _set_archived(ctx: ActionContext, record_id: uuid.UUID, archived: bool, action: ChangeAction):
    user = require_user(ctx, PERMISSION_WRITE)
    party = repo.set_interested_party_archived(ctx.db, record_id, archived, actor_id=user.id)
    if party is None:
        raise NotFound("Interested party not found")
    return succeed(ctx, action=action, target_type=TARGET, target_id=party.id,
                   paths=[LIST_PATH], data=_out(party))


@run_action(ChangeAction.ARCHIVE, TARGET)
def archive_interested_party(ctx: ActionContext, record_id: uuid.UUID):
    return _set_archived(ctx, record_id, True, ChangeAction.ARCHIVE)


@run_action(ChangeAction.UNARCHIVE, TARGET)
def unarchive_interested_party(ctx: ActionContext, record_id: uuid.UUID):
    return _set_archived(ctx, record_id, False, ChangeAction.UNARCHIVE)


@run_action(ChangeAction.REORDER, TARGET)
def reorder_interested_party(ctx: ActionContext, record_id: uuid.UUID, direction: str):
    """Move a party one slot up or down.

    At the top (up) or bottom (down) nothing changes and the result is still
    a success, with ``data.moved`` set to False.
    """
    user = require_user(ctx, PERMISSION_WRITE)
    request = parse_input(schemas.ReorderRequest, {"direction": direction})
    moved = repo.move_interested_party(ctx.db, record_id, request.direction, actor_id=user.id)
    return succeed(ctx, action=ChangeAction.REORDER, target_type=TARGET, target_id=record_id,
                   paths=[LIST_PATH], data={"moved": moved, "direction": request.direction.value},
                   metadata={"direction": request.direction.value, "moved": moved})


@run_action(ChangeAction.DELETE, TARGET)
def delete_interested_party(ctx: ActionContext, record_id: uuid.UUID):
    require_user(ctx, PERMISSION_DELETE)
    if not repo.delete_interested_party(ctx.db, record_id):
        raise NotFound("Interested party not found")
    return succeed(ctx, action=ChangeAction.DELETE, target_type=TARGET, target_id=record_id,
                   paths=[LIST_PATH])
