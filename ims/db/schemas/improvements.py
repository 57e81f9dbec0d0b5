import uuid
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from .common import TrackedRecord
from .users import UserSummary
from ims.utils.choices import IMPROVEMENT_CATEGORIES, IMPROVEMENT_TYPES, ROOT_CAUSE_TYPES


class ImprovementInput(BaseModel):
    category: str
    type: str
    root_cause_type: Optional[str] = None
    description: str = Field(min_length=1)
    corrective_action: Optional[str] = None
    date_raised: Optional[date] = None
    date_due: Optional[date] = None
    date_completed: Optional[date] = None
    internal_owner_id: Optional[uuid.UUID] = None
    external_owner: Optional[str] = None

    @field_validator("category")
    @classmethod
    def _validate_category(cls, v: str):
        if v not in IMPROVEMENT_CATEGORIES:
            raise ValueError(f"Invalid category: {v}")
        return v

    @field_validator("type")
    @classmethod
    def _validate_type(cls, v: str):
        if v not in IMPROVEMENT_TYPES:
            raise ValueError(f"Invalid improvement type: {v}")
        return v

    @field_validator("root_cause_type", mode="before")
    @classmethod
    def _validate_root_cause(cls, v):
        if v in (None, ""):
            return None
        if v not in ROOT_CAUSE_TYPES:
            raise ValueError(f"Invalid root cause type: {v}")
        return v

    @model_validator(mode="after")
    def _single_owner(self):
        if self.internal_owner_id and self.external_owner:
            raise ValueError("Set either internal_owner_id or external_owner, not both")
        return self


class Improvement(TrackedRecord):
    number: int
    category: str
    type: str
    root_cause_type: Optional[str] = None
    description: str
    corrective_action: Optional[str] = None
    date_raised: date
    date_due: Optional[date] = None
    date_completed: Optional[date] = None
    internal_owner: Optional[UserSummary] = None
    external_owner: Optional[str] = None
    owner_name: Optional[str] = None


class ImprovementListing(BaseModel):
    open: List[Improvement]
    completed: List[Improvement]
    latest_number: Optional[int] = None

