from typing import Optional
from pydantic import BaseModel, Field

from .common import RiskRatingsInput, TrackedRecord
from ims.utils.choices import ReorderDirection


class InterestedPartyInput(RiskRatingsInput):
    """Editable fields of an interested party; risk levels are always derived."""
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    needs_expectations: Optional[str] = None
    controls_recommendations: Optional[str] = None


class InterestedParty(TrackedRecord):
    name: str
    description: Optional[str] = None
    needs_expectations: Optional[str] = None
    controls_recommendations: Optional[str] = None
    initial_likelihood: int
    initial_severity: int
    residual_likelihood: int
    residual_severity: int
    risk_level: int
    residual_risk_level: int
    order: int


class ReorderRequest(BaseModel):
    direction: ReorderDirection
