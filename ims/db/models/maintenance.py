import uuid
from sqlalchemy import Column, String, Text, Boolean, Date, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, TrackedMixin
from ims.utils.dates import due_status


class MaintenanceItem(TrackedMixin, Base):
    __tablename__ = 'maintenance_items'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    reference = Column(String(100), nullable=True)
    serial_number = Column(String(100), nullable=True)
    # 'maintenance'|'calibration'
    category = Column(String(20), nullable=False, default='maintenance')
    sub_category = Column(String(100), nullable=True)
    supplier = Column(String(255), nullable=True)
    frequency = Column(String(100), nullable=True)
    action_required = Column(Text, nullable=True)
    due_date = Column(Date, nullable=False)
    owner_id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    allocated_to_id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    completed = Column(Boolean, nullable=False, default=False)

    owner = relationship("User", foreign_keys=[owner_id], lazy="joined")
    allocated_to = relationship("User", foreign_keys=[allocated_to_id], lazy="joined")
    documents = relationship("Document", back_populates="maintenance_item", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_maintenance_items_category_completed', 'category', 'completed'),
        Index('idx_maintenance_items_due_date', 'due_date'),
    )

    @property
    def due_status(self):
        return due_status(self.due_date)
