"""
Fixed option lists for register fields.

Centralized definitions so schemas, filters and forms agree on the stored
string values.
"""

from enum import Enum
from typing import FrozenSet, Tuple

# Improvement register
IMPROVEMENT_CATEGORIES: Tuple[str, ...] = (
    "Accident",
    "Complaint",
    "Environment",
    "External Audit",
    "Goods Damaged in Transit",
    "Health and Safety",
    "Improvement Suggestion",
    "Information Security",
    "Installation Issue",
    "Internal Audit",
    "Management Review",
    "Near Miss",
    "Process Issue",
    "Safeguarding",
    "Supplier Defect",
)

IMPROVEMENT_TYPES: Tuple[str, ...] = ("OFI", "Non Conformance", "Major Non Conformance")

ROOT_CAUSE_TYPES: Tuple[str, ...] = (
    "Materials",
    "Machinery",
    "Location",
    "Human Error",
    "Management Error",
    "Lack of Control Procedure",
    "Software",
    "Information Security",
)

# Audit schedule
AUDIT_STATUS_NOT_STARTED = "not_started"
AUDIT_STATUS_IN_PROGRESS = "in_progress"
AUDIT_STATUS_COMPLETED = "completed"
AUDIT_STATUSES: FrozenSet[str] = frozenset(
    {AUDIT_STATUS_NOT_STARTED, AUDIT_STATUS_IN_PROGRESS, AUDIT_STATUS_COMPLETED}
)

DOC_TYPE_PROCEDURE = "procedure"
DOC_TYPE_MANUAL = "manual"
DOC_TYPE_REGISTER = "register"

PROCEDURE_OPTIONS: Tuple[str, ...] = (
    "Procedure No 1 Planning & Review",
    "Procedure No 2 Information Control",
    "Procedure No 3 Problems & Improvements",
    "Procedure No 4 Training & Development",
    "Procedure No 5 Sales Administration",
    "Procedure No 6 Supplier & Contractor Control",
    "Procedure No 7 Operational Control",
    "Procedure No 8 Technical File Preperation",
)

MANUAL_OPTIONS: Tuple[str, ...] = ("Integrated Manual",)

REGISTER_OPTIONS: Tuple[str, ...] = (
    "Training",
    "Improvement Register",
    "Statement of Applicability",
    "Legal Register",
    "Suppliers",
    "Company Energy Consumption Register - 2022",
    "Assets Register - 2022",
    "Register of Standards",
    "Calibration Schedule",
    "Vehicle Checklist",
    "Training Matrix",
    "Asset Risk Assessment & Treatment Plan.xls",
    "Warehouse SLA 2021",
    "2021 SLA",
    "PPN-0621-AA Xpress Carbon-Reduction-Plan Published and Signed Declaration",
    "ISMS Monthly Checks",
)

AUDIT_DOCUMENT_OPTIONS = {
    DOC_TYPE_PROCEDURE: PROCEDURE_OPTIONS,
    DOC_TYPE_MANUAL: MANUAL_OPTIONS,
    DOC_TYPE_REGISTER: REGISTER_OPTIONS,
}

# Maintenance schedule
MAINTENANCE_CATEGORY_MAINTENANCE = "maintenance"
MAINTENANCE_CATEGORY_CALIBRATION = "calibration"
MAINTENANCE_CATEGORIES: FrozenSet[str] = frozenset(
    {MAINTENANCE_CATEGORY_MAINTENANCE, MAINTENANCE_CATEGORY_CALIBRATION}
)


class AuditStatusEnum(str, Enum):
    not_started = AUDIT_STATUS_NOT_STARTED
    in_progress = AUDIT_STATUS_IN_PROGRESS
    completed = AUDIT_STATUS_COMPLETED


class AuditDocTypeEnum(str, Enum):
    procedure = DOC_TYPE_PROCEDURE
    manual = DOC_TYPE_MANUAL
    register = DOC_TYPE_REGISTER


class MaintenanceCategoryEnum(str, Enum):
    maintenance = MAINTENANCE_CATEGORY_MAINTENANCE
    calibration = MAINTENANCE_CATEGORY_CALIBRATION


class ReorderDirection(str, Enum):
    up = "up"
    down = "down"
