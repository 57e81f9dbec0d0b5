"""
Change log API endpoints (admin only).
"""
from typing import List, Optional
import uuid
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ims.api.deps import require_admin
from ims.db import schemas
from ims.db.database import get_db
from ims.db.repositories import changelog as changelog_repo

router = APIRouter(prefix="/change-log", tags=["change-log"])


@router.get("", response_model=List[schemas.ChangeLogEntry])
def list_change_log(
    user_id: Optional[uuid.UUID] = None,
    action_type: Optional[str] = None,
    target_type: Optional[str] = None,
    target_id: Optional[uuid.UUID] = None,
    status: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    return changelog_repo.get_entries(
        db,
        user_id=user_id,
        action_type=action_type,
        target_type=target_type,
        target_id=target_id,
        status=status,
        skip=skip,
        limit=min(limit, 500),
    )
