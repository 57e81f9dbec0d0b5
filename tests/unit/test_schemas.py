import uuid
from datetime import date

import pytest
from pydantic import ValidationError

from ims.db import schemas


def test_risk_ratings_default_and_parse():
    data = schemas.InterestedPartyInput(name="Regulator", initial_likelihood="4", initial_severity="",
                                        residual_likelihood="x", residual_severity=0)
    assert (data.initial_likelihood, data.initial_severity) == (4, 3)
    assert (data.residual_likelihood, data.residual_severity) == (3, 3)


def test_risk_ratings_read_leading_integer():
    data = schemas.InterestedPartyInput(name="Regulator", initial_likelihood=2.0, initial_severity="4.6",
                                        residual_likelihood="1 (rare)", residual_severity=5)
    assert (data.initial_likelihood, data.initial_severity, data.residual_likelihood) == (2, 4, 1)


def test_risk_ratings_missing_fields_default_to_three():
    data = schemas.OrganizationalContextInput(category="Political", issue="Elections")
    assert data.initial_likelihood == data.residual_severity == 3


def test_risk_rating_out_of_range_is_invalid():
    with pytest.raises(ValidationError) as exc:
        schemas.InterestedPartyInput(name="Supplier", initial_severity="9")
    assert "initial_severity" in str(exc.value)


def test_interested_party_requires_name():
    with pytest.raises(ValidationError):
        schemas.InterestedPartyInput(name="")


def test_improvement_input_validation():
    ok = schemas.ImprovementInput(category="Complaint", type="OFI", description="Fix labels", root_cause_type="")
    assert ok.root_cause_type is None
    with pytest.raises(ValidationError):
        schemas.ImprovementInput(category="Nope", type="OFI", description="x")
    with pytest.raises(ValidationError):
        schemas.ImprovementInput(category="Complaint", type="OFI", description="x",
                                 internal_owner_id=uuid.uuid4(), external_owner="Acme")


def test_audit_input_completion_forces_status():
    data = schemas.AuditInput(title="ISO 9001 internal", status="in_progress", date_completed=date(2025, 3, 1))
    assert data.status.value == "completed"


def test_audit_input_next_audit_needs_date():
    with pytest.raises(ValidationError):
        schemas.AuditInput(title="Annual", create_next_audit=True)


def test_audit_input_rejects_unknown_document_option():
    with pytest.raises(ValidationError):
        schemas.AuditInput(title="Annual", procedures=["not-a-procedure"])


def test_action_result_hides_error_code():
    result = schemas.ActionResult.failure("nope", "forbidden")
    assert result.error_code == "forbidden"
    assert "error_code" not in result.model_dump()
    assert schemas.ActionResult.ok(data={"a": 1}).success is True
