"""
Domain-split Pydantic schemas re-exported from one module.
"""

# Import order: define base/simple types first to satisfy forward refs
from .users import UserBase, User, UserSummary, UserRoleUpdate
from .common import ActionResult, TrackedRecord, RiskRatingsInput, RATING_FIELDS
from .documents import DocumentCreate, Document
from .interested_parties import InterestedPartyInput, InterestedParty, ReorderRequest
from .organizational_context import (
    OrganizationalContextInput,
    OrganizationalContextEntry,
    OrganizationalContextListing,
)
from .improvements import ImprovementInput, Improvement, ImprovementListing
from .audits import AuditDocumentRef, AuditInput, Audit, AuditDetail, AuditSaveResult
from .maintenance import MaintenanceItemInput, MaintenanceItem, MaintenanceItemDetail, MaintenanceListing
from .legal import (
    LegalRegisterInput,
    LegalReviewInput,
    LegalReview,
    LegalRegisterEntry,
    LegalRegisterListing,
)
from .changelog import ChangeLogBase, ChangeLogCreate, ChangeLogEntry

__all__ = [
    # users
    "UserBase",
    "User",
    "UserSummary",
    "UserRoleUpdate",
    # common
    "ActionResult",
    "TrackedRecord",
    "RiskRatingsInput",
    "RATING_FIELDS",
    # documents
    "DocumentCreate",
    "Document",
    # risk registers
    "InterestedPartyInput",
    "InterestedParty",
    "ReorderRequest",
    "OrganizationalContextInput",
    "OrganizationalContextEntry",
    "OrganizationalContextListing",
    # improvement register
    "ImprovementInput",
    "Improvement",
    "ImprovementListing",
    # audit schedule
    "AuditDocumentRef",
    "AuditInput",
    "Audit",
    "AuditDetail",
    "AuditSaveResult",
    # maintenance
    "MaintenanceItemInput",
    "MaintenanceItem",
    "MaintenanceItemDetail",
    "MaintenanceListing",
    # legal register
    "LegalRegisterInput",
    "LegalReviewInput",
    "LegalReview",
    "LegalRegisterEntry",
    "LegalRegisterListing",
    # change log
    "ChangeLogBase",
    "ChangeLogCreate",
    "ChangeLogEntry",
]
