import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from ims.utils.role_permissions import RoleEnum


class UserBase(BaseModel):
    email: str
    name: str | None = None


class User(UserBase):
    id: uuid.UUID
    role: RoleEnum
    active: bool
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class UserSummary(BaseModel):
    """Name/email reference embedded in register rows (createdBy, owner, ...)."""
    id: uuid.UUID
    name: str | None = None
    email: str
    model_config = ConfigDict(from_attributes=True)


class UserRoleUpdate(BaseModel):
    role: RoleEnum | None = None
    active: bool | None = None
