import uuid
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Document(Base):
    """Metadata for a file attached to a maintenance item or an audit.

    File bytes live in external storage under ``storage_key``.
    """
    __tablename__ = 'documents'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    filename = Column(String(255), nullable=False)
    content_type = Column(String(255), nullable=True)
    size_bytes = Column(Integer, nullable=True)
    storage_key = Column(String(1024), nullable=False)
    uploaded_by_id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    maintenance_item_id = Column(UUID(as_uuid=True), ForeignKey('maintenance_items.id', ondelete='CASCADE'), nullable=True)
    audit_id = Column(UUID(as_uuid=True), ForeignKey('audits.id', ondelete='CASCADE'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    uploaded_by = relationship("User", lazy="joined")
    maintenance_item = relationship("MaintenanceItem", back_populates="documents")
    audit = relationship("Audit", back_populates="documents")

    __table_args__ = (
        Index('idx_documents_maintenance_item_id', 'maintenance_item_id'),
        Index('idx_documents_audit_id', 'audit_id'),
        CheckConstraint(
            "(maintenance_item_id IS NOT NULL) <> (audit_id IS NOT NULL)",
            name='ck_documents_single_owner',
        ),
    )
