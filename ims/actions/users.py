"""
User administration actions.
"""
from __future__ import annotations

import uuid
from typing import Any

from ims.changelog import ChangeAction, TargetType
from ims.db import schemas
from ims.db.repositories import users as repo
from ims.errors import Forbidden, NotFound, ValidationFailure
from ims.utils.role_permissions import ROLE_ADMIN, PERMISSION_WRITE
from .base import ActionContext, parse_input, require_user, run_action, succeed


@run_action(ChangeAction.USER_UPDATE, TargetType.USER)
def update_user(ctx: ActionContext, record_id: uuid.UUID, data: Any):
    user = require_user(ctx, PERMISSION_WRITE)
    if user.role != ROLE_ADMIN:
        raise Forbidden("Only admins can change users")
    payload = parse_input(schemas.UserRoleUpdate, data)
    if record_id == user.id and (payload.active is False or (payload.role and payload.role.value != ROLE_ADMIN)):
        raise ValidationFailure("Admins cannot demote or deactivate themselves")
    updated = repo.update_user(
        ctx.db,
        record_id,
        role=payload.role.value if payload.role else None,
        active=payload.active,
    )
    if updated is None:
        raise NotFound("User not found")
    return succeed(ctx, action=ChangeAction.USER_UPDATE, target_type=TargetType.USER, target_id=updated.id,
                   paths=[], data=schemas.User.model_validate(updated),
                   metadata=payload.model_dump(mode="json", exclude_none=True))
