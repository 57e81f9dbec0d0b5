import uuid
from sqlalchemy import Column, String, Text, Date, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, TrackedMixin


class Audit(TrackedMixin, Base):
    __tablename__ = 'audits'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    auditor_id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    external_auditor = Column(String(255), nullable=True)
    planned_start_date = Column(Date, nullable=True)
    actual_start_date = Column(Date, nullable=True)
    follow_up_date = Column(Date, nullable=True)
    date_completed = Column(Date, nullable=True)
    # 'not_started'|'in_progress'|'completed'
    status = Column(String(20), nullable=False, default='not_started')

    auditor = relationship("User", foreign_keys=[auditor_id], lazy="joined")
    audit_documents = relationship(
        "AuditDocument",
        back_populates="audit",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    documents = relationship("Document", back_populates="audit", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_audits_planned_start_date', 'planned_start_date'),
    )


class AuditDocument(Base):
    __tablename__ = 'audit_documents'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    audit_id = Column(UUID(as_uuid=True), ForeignKey('audits.id', ondelete='CASCADE'), nullable=False)
    # 'procedure'|'manual'|'register'
    doc_type = Column(String(20), nullable=False)
    doc_id = Column(Text, nullable=False)

    audit = relationship("Audit", back_populates="audit_documents")

    __table_args__ = (
        Index('idx_audit_documents_audit_id', 'audit_id'),
    )
