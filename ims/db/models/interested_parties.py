import uuid
from sqlalchemy import Column, String, Text, Integer, Index
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, TrackedMixin


class InterestedParty(TrackedMixin, Base):
    __tablename__ = 'interested_parties'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    needs_expectations = Column(Text, nullable=True)
    initial_likelihood = Column(Integer, nullable=False, default=3)
    initial_severity = Column(Integer, nullable=False, default=3)
    controls_recommendations = Column(Text, nullable=True)
    residual_likelihood = Column(Integer, nullable=False, default=3)
    residual_severity = Column(Integer, nullable=False, default=3)
    # Derived from the likelihood/severity pairs on every write
    risk_level = Column(Integer, nullable=False)
    residual_risk_level = Column(Integer, nullable=False)
    # Display sequence among non-archived parties
    order = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index('idx_interested_parties_archived_order', 'archived', 'order'),
    )
