"""
Shared SQLAlchemy base and column helpers.
"""
from datetime import datetime, UTC

from sqlalchemy import Boolean, Column, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base, declared_attr, relationship

# SQLite compilation shim for PostgreSQL-only types used when tests run
# against SQLite.
from .. import sqlite_compiler_shims  # noqa: F401


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


Base = declarative_base()


class TrackedMixin:
    """Archive flag, timestamps and created_by/updated_by ownership references."""

    archived = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    @declared_attr
    def created_by_id(cls):
        return Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)

    @declared_attr
    def updated_by_id(cls):
        return Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)

    @declared_attr
    def created_by(cls):
        return relationship("User", foreign_keys=f"{cls.__name__}.created_by_id", lazy="joined")

    @declared_attr
    def updated_by(cls):
        return relationship("User", foreign_keys=f"{cls.__name__}.updated_by_id", lazy="joined")
