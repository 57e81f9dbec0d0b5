import uuid

from sqlalchemy.exc import OperationalError

from ims.actions import interested_parties as actions
from ims.db import models
from ims.db.repositories import interested_parties as repo


def _payload(**overrides):
    data = {
        "name": "Customers",
        "description": "Retail and trade customers",
        "needs_expectations": "On-time delivery",
        "initial_likelihood": 4,
        "initial_severity": 5,
        "controls_recommendations": "Quarterly survey",
        "residual_likelihood": 1,
        "residual_severity": 2,
    }
    data.update(overrides)
    return data


def test_create_scores_initial_and_residual(ctx_factory, editor, recorded_paths):
    result = actions.create_interested_party(ctx_factory(editor), _payload())
    assert result.success is True
    assert result.data.risk_level == 20
    assert result.data.residual_risk_level == 2
    assert result.data.created_by.id == editor.id
    assert result.id == result.data.id
    assert recorded_paths == ["/interested-parties"]


def test_create_from_raw_form_strings(ctx_factory, editor):
    result = actions.create_interested_party(
        ctx_factory(editor),
        {"name": "Neighbours", "initial_likelihood": "2", "initial_severity": "", "residual_likelihood": "n/a"},
    )
    assert result.success is True
    assert (result.data.initial_likelihood, result.data.initial_severity) == (2, 3)
    assert result.data.risk_level == 6
    assert result.data.residual_risk_level == 9


def test_create_rejects_out_of_range_rating(ctx_factory, editor, db_session):
    result = actions.create_interested_party(ctx_factory(editor), _payload(initial_severity=6))
    assert result.success is False
    assert result.error_code == "validation"
    assert "initial_severity" in result.error
    assert db_session.query(models.InterestedParty).count() == 0


def test_mutation_without_user_fails(ctx_factory, db_session, recorded_paths):
    result = actions.create_interested_party(ctx_factory(None), _payload())
    assert result.success is False
    assert result.error_code == "unauthorized"
    assert db_session.query(models.InterestedParty).count() == 0
    assert db_session.query(models.ChangeLogEntry).count() == 0
    assert recorded_paths == []


def test_viewer_is_forbidden_and_failure_is_logged(ctx_factory, viewer, db_session):
    result = actions.create_interested_party(ctx_factory(viewer), _payload())
    assert result.success is False
    assert result.error_code == "forbidden"
    entry = db_session.query(models.ChangeLogEntry).one()
    assert entry.status == "failure"
    assert entry.actor_user_id == viewer.id
    assert entry.action_type == "create"


def test_update_replaces_fields_and_invalidates_detail(ctx_factory, editor, admin, recorded_paths):
    created = actions.create_interested_party(ctx_factory(editor), _payload())
    recorded_paths.clear()
    result = actions.update_interested_party(ctx_factory(admin), created.id, _payload(name="Key customers", initial_likelihood=2))
    assert result.success is True
    assert result.data.name == "Key customers"
    assert result.data.risk_level == 10
    assert result.data.updated_by.id == admin.id
    assert result.data.created_by.id == editor.id
    assert recorded_paths == ["/interested-parties", f"/interested-parties/{created.id}"]


def test_update_unknown_party(ctx_factory, editor):
    result = actions.update_interested_party(ctx_factory(editor), uuid.uuid4(), _payload())
    assert result.success is False
    assert result.error_code == "not_found"


def test_archive_then_unarchive_restores_record(ctx_factory, editor, admin, db_session):
    created = actions.create_interested_party(ctx_factory(editor), _payload()).data
    archived = actions.archive_interested_party(ctx_factory(admin), created.id)
    assert archived.success and archived.data.archived is True
    assert repo.get_interested_parties(db_session) == []
    restored = actions.unarchive_interested_party(ctx_factory(admin), created.id).data
    assert restored.archived is False
    assert restored.updated_by.id == admin.id
    unchanged = ("name", "description", "needs_expectations", "controls_recommendations",
                 "risk_level", "residual_risk_level", "order", "created_at")
    for field in unchanged:
        assert getattr(restored, field) == getattr(created, field)


def test_delete_then_get_and_second_delete(ctx_factory, admin, editor, db_session):
    created = actions.create_interested_party(ctx_factory(editor), _payload()).data
    first = actions.delete_interested_party(ctx_factory(admin), created.id)
    assert first.success is True
    assert repo.get_interested_party(db_session, created.id) is None
    second = actions.delete_interested_party(ctx_factory(admin), created.id)
    assert second.success is False
    assert second.error_code == "not_found"


def test_editor_cannot_delete(ctx_factory, editor):
    created = actions.create_interested_party(ctx_factory(editor), _payload()).data
    result = actions.delete_interested_party(ctx_factory(editor), created.id)
    assert result.error_code == "forbidden"


def test_storage_error_becomes_failure_result(ctx_factory, editor, monkeypatch):
    def _boom(*args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("disk full"))
    monkeypatch.setattr(repo, "create_interested_party", _boom)
    result = actions.create_interested_party(ctx_factory(editor), _payload())
    assert result.success is False
    assert result.error_code == "storage"
    assert result.error == "Storage operation failed"


def test_success_is_recorded_in_change_log(ctx_factory, editor, db_session):
    created = actions.create_interested_party(ctx_factory(editor), _payload()).data
    entry = db_session.query(models.ChangeLogEntry).one()
    assert (entry.action_type, entry.status, entry.target_type) == ("create", "success", "interested_party")
    assert entry.target_id == created.id
    assert entry.metadata_json == {"name": "Customers"}
