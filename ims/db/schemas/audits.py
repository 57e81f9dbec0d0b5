import uuid
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, model_validator

from .common import TrackedRecord
from .users import UserSummary
from .documents import Document
from ims.utils.choices import AUDIT_DOCUMENT_OPTIONS, AuditDocTypeEnum, AuditStatusEnum


class AuditDocumentRef(BaseModel):
    doc_type: AuditDocTypeEnum
    doc_id: str
    model_config = ConfigDict(from_attributes=True)


class AuditInput(BaseModel):
    title: str
    procedures: List[str] = []
    manuals: List[str] = []
    registers: List[str] = []
    auditor_id: Optional[uuid.UUID] = None
    external_auditor: Optional[str] = None
    planned_start_date: Optional[date] = None
    actual_start_date: Optional[date] = None
    follow_up_date: Optional[date] = None
    date_completed: Optional[date] = None
    status: AuditStatusEnum = AuditStatusEnum.not_started
    create_next_audit: bool = False
    next_audit_date: Optional[date] = None

    @model_validator(mode="after")
    def _check(self):
        if not self.title.strip():
            raise ValueError("Title is required")
        for doc_type, values in (("procedure", self.procedures), ("manual", self.manuals), ("register", self.registers)):
            allowed = AUDIT_DOCUMENT_OPTIONS[doc_type]
            unknown = [v for v in values if v not in allowed]
            if unknown:
                raise ValueError(f"Unknown {doc_type} option(s): {', '.join(unknown)}")
        if self.create_next_audit and self.next_audit_date is None:
            raise ValueError("next_audit_date is required when create_next_audit is set")
        if self.date_completed is not None:
            self.status = AuditStatusEnum.completed
        return self

    def document_refs(self) -> List[AuditDocumentRef]:
        refs = [AuditDocumentRef(doc_type=AuditDocTypeEnum.procedure, doc_id=v) for v in self.procedures]
        refs += [AuditDocumentRef(doc_type=AuditDocTypeEnum.manual, doc_id=v) for v in self.manuals]
        refs += [AuditDocumentRef(doc_type=AuditDocTypeEnum.register, doc_id=v) for v in self.registers]
        return refs


class Audit(TrackedRecord):
    title: str
    auditor: Optional[UserSummary] = None
    external_auditor: Optional[str] = None
    planned_start_date: Optional[date] = None
    actual_start_date: Optional[date] = None
    follow_up_date: Optional[date] = None
    date_completed: Optional[date] = None
    status: AuditStatusEnum
    audit_documents: List[AuditDocumentRef] = []


class AuditDetail(Audit):
    documents: List[Document] = []


class AuditSaveResult(BaseModel):
    audit: Audit
    next_audit: Optional[Audit] = None
