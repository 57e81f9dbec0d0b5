import uuid
from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .common import TrackedRecord
from .users import UserSummary


class LegalRegisterInput(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    section: Optional[str] = None
    legislation_url: Optional[str] = None
    description: Optional[str] = None
    compliance_notes: Optional[str] = None


class LegalReviewInput(BaseModel):
    review_date: date
    notes: Optional[str] = None


class LegalReview(BaseModel):
    id: uuid.UUID
    review_date: date
    notes: Optional[str] = None
    reviewed_by: Optional[UserSummary] = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class LegalRegisterEntry(TrackedRecord):
    title: str
    section: Optional[str] = None
    legislation_url: Optional[str] = None
    description: Optional[str] = None
    compliance_notes: Optional[str] = None
    approved: bool
    latest_review: Optional[LegalReview] = None


class LegalRegisterListing(BaseModel):
    approved: List[LegalRegisterEntry]
    unapproved: List[LegalRegisterEntry]
    archived: List[LegalRegisterEntry]
