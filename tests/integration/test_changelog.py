import uuid

from ims.changelog import ChangeAction, ChangeStatus, TargetType, log, log_failure
from ims.db.repositories import changelog as changelog_repo


def test_log_persists_plain_strings(db_session, editor):
    target = uuid.uuid4()
    entry = log(
        db_session,
        action=ChangeAction.ARCHIVE,
        target_type=TargetType.MAINTENANCE_ITEM,
        target_id=target,
        actor_user_id=editor.id,
        metadata={"reason": "sold"},
    )
    assert entry.action_type == "archive"
    assert entry.status == ChangeStatus.SUCCESS.value
    assert entry.target_type == "maintenance_item"
    assert entry.target_id == target
    assert entry.metadata_json == {"reason": "sold"}


def test_log_accepts_raw_strings(db_session, editor):
    entry = log(db_session, action="custom", status="custom_status", target_type="custom", actor_user_id=editor.id)
    assert (entry.action_type, entry.status, entry.target_type) == ("custom", "custom_status", "custom")
    assert entry.metadata_json == {}


def test_failure_rows_and_filters(db_session, editor, admin):
    log(db_session, action=ChangeAction.CREATE, target_type=TargetType.AUDIT, actor_user_id=editor.id)
    log_failure(db_session, action=ChangeAction.DELETE, target_type=TargetType.AUDIT, target_id=None,
                actor_user_id=editor.id, reason="Forbidden")
    log(db_session, action=ChangeAction.CREATE, target_type=TargetType.IMPROVEMENT, actor_user_id=admin.id)

    failures = changelog_repo.get_entries(db_session, status="failure")
    assert len(failures) == 1
    assert failures[0].reason == "Forbidden"
    assert len(changelog_repo.get_entries(db_session, user_id=editor.id)) == 2
    assert len(changelog_repo.get_entries(db_session, target_type="improvement")) == 1
    assert len(changelog_repo.get_entries(db_session, action_type="create", limit=1)) == 1
