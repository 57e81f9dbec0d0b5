"""
Document attachment actions not tied to one register.
"""
from __future__ import annotations

import uuid

from ims.changelog import ChangeAction, TargetType
from ims.db.repositories import documents as repo
from ims.errors import NotFound
from ims.utils.role_permissions import PERMISSION_DELETE
from .audits import LIST_PATH as AUDITS_PATH
from .base import ActionContext, detail_path, require_user, run_action, succeed
from .maintenance import LIST_PATH as MAINTENANCE_PATH


@run_action(ChangeAction.DOCUMENT_DELETE, TargetType.DOCUMENT)
def delete_document(ctx: ActionContext, record_id: uuid.UUID):
    """Remove a document's metadata; stored bytes are left to the storage service."""
    require_user(ctx, PERMISSION_DELETE)
    document = repo.get_document(ctx.db, record_id)
    if document is None:
        raise NotFound("Document not found")
    if document.audit_id is not None:
        paths = [detail_path(AUDITS_PATH, document.audit_id)]
    else:
        paths = [detail_path(MAINTENANCE_PATH, document.maintenance_item_id)]
    storage_key = document.storage_key
    repo.delete_document(ctx.db, record_id)
    return succeed(ctx, action=ChangeAction.DOCUMENT_DELETE, target_type=TargetType.DOCUMENT,
                   target_id=record_id, paths=paths,
                   metadata={"storage_key": storage_key})
