import uuid
from sqlalchemy import Column, String, DateTime, Boolean, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc


class User(Base):
    __tablename__ = 'users'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=True)
    # 'admin'|'editor'|'viewer'
    role = Column(String(20), nullable=False, default='viewer')
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    __table_args__ = (
        CheckConstraint("role in ('admin','editor','viewer')", name='ck_users_role'),
    )
