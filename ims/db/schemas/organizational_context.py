from typing import Dict, List, Optional
from pydantic import BaseModel, Field, computed_field

from .common import RiskRatingsInput, TrackedRecord
from ims.risk import risk_band


class OrganizationalContextInput(RiskRatingsInput):
    category: str = Field(min_length=1, max_length=100)
    sub_category: Optional[str] = None
    issue: str = Field(min_length=1)
    objectives: Optional[str] = None
    controls_recommendations: Optional[str] = None


class OrganizationalContextEntry(TrackedRecord):
    category: str
    sub_category: Optional[str] = None
    issue: str
    objectives: Optional[str] = None
    controls_recommendations: Optional[str] = None
    initial_likelihood: int
    initial_severity: int
    residual_likelihood: int
    residual_severity: int
    initial_risk_level: int
    residual_risk_level: int

    @computed_field
    @property
    def initial_risk_band(self) -> str:
        return risk_band(self.initial_risk_level)

    @computed_field
    @property
    def residual_risk_band(self) -> str:
        return risk_band(self.residual_risk_level)


class OrganizationalContextListing(BaseModel):
    entries: List[OrganizationalContextEntry]
    # Sorted category names mapped to their entries
    by_category: Dict[str, List[OrganizationalContextEntry]]
