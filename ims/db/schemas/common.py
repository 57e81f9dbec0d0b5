"""
Shared schema pieces: the action result envelope, tracked-record fields and
likelihood/severity intake.
"""
import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ims.risk import parse_rating
from .users import UserSummary


class ActionResult(BaseModel):
    """Uniform outcome of every mutating action."""
    success: bool
    id: Optional[uuid.UUID] = None
    data: Optional[Any] = None
    error: Optional[str] = None
    # Failure kind for the HTTP layer; not part of the response body
    error_code: Optional[str] = Field(default=None, exclude=True)

    @classmethod
    def ok(cls, data: Any = None, id: Optional[uuid.UUID] = None) -> "ActionResult":
        return cls(success=True, data=data, id=id)

    @classmethod
    def failure(cls, error: str, error_code: str) -> "ActionResult":
        return cls(success=False, error=error, error_code=error_code)


class TrackedRecord(BaseModel):
    """Fields every register row exposes."""
    id: uuid.UUID
    archived: bool
    created_at: datetime
    updated_at: datetime
    created_by: Optional[UserSummary] = None
    updated_by: Optional[UserSummary] = None
    model_config = ConfigDict(from_attributes=True)


RATING_FIELDS = (
    "initial_likelihood",
    "initial_severity",
    "residual_likelihood",
    "residual_severity",
)


class RiskRatingsInput(BaseModel):
    """Initial and residual likelihood/severity pairs.

    Raw values go through `parse_rating`: blank or unparsable input becomes 3,
    values outside 1..5 fail validation.
    """
    initial_likelihood: int = 3
    initial_severity: int = 3
    residual_likelihood: int = 3
    residual_severity: int = 3

    @field_validator(*RATING_FIELDS, mode="before")
    @classmethod
    def _parse_rating(cls, v: Any, info):
        return parse_rating(v, field=info.field_name)
