import uuid
from sqlalchemy import Column, String, Text, Integer, Date, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, TrackedMixin


class ImprovementRecord(TrackedMixin, Base):
    __tablename__ = 'improvement_register'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # Sequential human-facing reference, assigned on create
    number = Column(Integer, nullable=False, unique=True)
    category = Column(String(100), nullable=False)
    type = Column(String(50), nullable=False)
    root_cause_type = Column(String(100), nullable=True)
    description = Column(Text, nullable=False)
    corrective_action = Column(Text, nullable=True)
    date_raised = Column(Date, nullable=False)
    date_due = Column(Date, nullable=True)
    date_completed = Column(Date, nullable=True)
    internal_owner_id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    external_owner = Column(String(255), nullable=True)

    internal_owner = relationship("User", foreign_keys=[internal_owner_id], lazy="joined")

    __table_args__ = (
        Index('idx_improvement_register_category', 'category'),
        Index('idx_improvement_register_date_completed', 'date_completed'),
    )

    @property
    def owner_name(self):
        if self.internal_owner is not None:
            return self.internal_owner.name
        return self.external_owner or None
