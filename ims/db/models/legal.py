import uuid
from sqlalchemy import Column, String, Text, Boolean, Date, DateTime, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, TrackedMixin, now_utc


class LegalRegisterEntry(TrackedMixin, Base):
    __tablename__ = 'legal_register'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    section = Column(String(255), nullable=True)
    legislation_url = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    compliance_notes = Column(Text, nullable=True)
    approved = Column(Boolean, nullable=False, default=False)

    reviews = relationship(
        "LegalReview",
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="LegalReview.review_date.desc()",
        lazy="selectin",
    )

    __table_args__ = (
        Index('idx_legal_register_archived_approved', 'archived', 'approved'),
    )

    @property
    def latest_review(self):
        return self.reviews[0] if self.reviews else None


class LegalReview(Base):
    __tablename__ = 'legal_reviews'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    entry_id = Column(UUID(as_uuid=True), ForeignKey('legal_register.id', ondelete='CASCADE'), nullable=False)
    review_date = Column(Date, nullable=False)
    reviewed_by_id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    entry = relationship("LegalRegisterEntry", back_populates="reviews")
    reviewed_by = relationship("User", lazy="joined")

    __table_args__ = (
        Index('idx_legal_reviews_entry_id_review_date', 'entry_id', 'review_date'),
    )
