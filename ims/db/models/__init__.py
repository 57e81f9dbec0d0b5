"""
Domain-split SQLAlchemy models with a single import surface.

Exposes `Base`, `now_utc`, and all ORM classes.
"""

from .base import Base, TrackedMixin, now_utc  # re-export

# Domain models
from .users import User
from .interested_parties import InterestedParty
from .organizational_context import OrganizationalContextEntry
from .improvements import ImprovementRecord
from .audits import Audit, AuditDocument
from .maintenance import MaintenanceItem
from .legal import LegalRegisterEntry, LegalReview
from .documents import Document
from .changelog import ChangeLogEntry

__all__ = [
    # base
    "Base",
    "TrackedMixin",
    "now_utc",
    # users
    "User",
    # risk registers
    "InterestedParty",
    "OrganizationalContextEntry",
    # improvement / audit schedule
    "ImprovementRecord",
    "Audit",
    "AuditDocument",
    # maintenance / legal
    "MaintenanceItem",
    "LegalRegisterEntry",
    "LegalReview",
    # attachments / change log
    "Document",
    "ChangeLogEntry",
]
