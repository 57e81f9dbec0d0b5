import uuid
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field

from .common import TrackedRecord
from .users import UserSummary
from .documents import Document
from ims.utils.choices import MaintenanceCategoryEnum


class MaintenanceItemInput(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    reference: Optional[str] = None
    serial_number: Optional[str] = None
    category: MaintenanceCategoryEnum = MaintenanceCategoryEnum.maintenance
    sub_category: Optional[str] = None
    supplier: Optional[str] = None
    frequency: Optional[str] = None
    action_required: Optional[str] = None
    due_date: date
    owner_id: Optional[uuid.UUID] = None
    allocated_to_id: Optional[uuid.UUID] = None
    completed: bool = False


class MaintenanceItem(TrackedRecord):
    name: str
    reference: Optional[str] = None
    serial_number: Optional[str] = None
    category: MaintenanceCategoryEnum
    sub_category: Optional[str] = None
    supplier: Optional[str] = None
    frequency: Optional[str] = None
    action_required: Optional[str] = None
    due_date: date
    due_status: Optional[str] = None
    owner: Optional[UserSummary] = None
    allocated_to: Optional[UserSummary] = None
    completed: bool


class MaintenanceItemDetail(MaintenanceItem):
    documents: List[Document] = []


class MaintenanceListing(BaseModel):
    maintenance_items: List[MaintenanceItem]
    closed_maintenance_items: List[MaintenanceItem]
    calibration_items: List[MaintenanceItem]
    closed_calibration_items: List[MaintenanceItem]
    sub_categories: List[str]
