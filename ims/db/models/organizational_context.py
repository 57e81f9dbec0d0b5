import uuid
from sqlalchemy import Column, String, Text, Integer, Index
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, TrackedMixin


class OrganizationalContextEntry(TrackedMixin, Base):
    __tablename__ = 'organizational_context'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    category = Column(String(100), nullable=False)
    sub_category = Column(String(255), nullable=True)
    issue = Column(Text, nullable=False)
    objectives = Column(Text, nullable=True)
    controls_recommendations = Column(Text, nullable=True)
    initial_likelihood = Column(Integer, nullable=False, default=3)
    initial_severity = Column(Integer, nullable=False, default=3)
    residual_likelihood = Column(Integer, nullable=False, default=3)
    residual_severity = Column(Integer, nullable=False, default=3)
    initial_risk_level = Column(Integer, nullable=False)
    residual_risk_level = Column(Integer, nullable=False)

    __table_args__ = (
        Index('idx_organizational_context_category', 'category'),
    )
