import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .users import UserSummary


class DocumentCreate(BaseModel):
    filename: str = Field(min_length=1, max_length=255)
    content_type: Optional[str] = None
    size_bytes: Optional[int] = Field(default=None, ge=0)
    storage_key: str = Field(min_length=1, max_length=1024)


class Document(BaseModel):
    id: uuid.UUID
    filename: str
    content_type: Optional[str] = None
    size_bytes: Optional[int] = None
    storage_key: str
    maintenance_item_id: Optional[uuid.UUID] = None
    audit_id: Optional[uuid.UUID] = None
    uploaded_by: Optional[UserSummary] = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
