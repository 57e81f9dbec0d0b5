from datetime import date, timedelta

from ims.db import schemas
from ims.db.repositories import audits, improvements, interested_parties, legal, maintenance, organizational_context, records, users
from ims.db import models


def test_list_records_ignores_blank_and_all_filters(db_session, editor):
    audits.create_audit(db_session, schemas.AuditInput(title="A", status="in_progress"), actor_id=editor.id)
    audits.create_audit(db_session, schemas.AuditInput(title="B"), actor_id=editor.id)
    for value in (None, "", "all"):
        assert len(audits.get_audits(db_session, status=value)) == 2
    assert [a.title for a in audits.get_audits(db_session, status="in_progress")] == ["A"]


def test_archived_filter_modes(db_session, editor):
    keep = organizational_context.create_entry(
        db_session, schemas.OrganizationalContextInput(category="Economic", issue="Inflation"), actor_id=editor.id)
    gone = organizational_context.create_entry(
        db_session, schemas.OrganizationalContextInput(category="Social", issue="Skills gap"), actor_id=editor.id)
    organizational_context.set_entry_archived(db_session, gone.id, True, actor_id=editor.id)
    assert [e.id for e in organizational_context.get_entries(db_session)] == [keep.id]
    assert len(organizational_context.get_entries(db_session, include_archived=True)) == 2
    only_archived = records.list_records(db_session, models.OrganizationalContextEntry, archived=True)
    assert [e.id for e in only_archived] == [gone.id]


def test_group_by_category_is_sorted(db_session, editor):
    for category, issue in (("Technological", "Cyber"), ("Economic", "Inflation"), ("Technological", "Legacy")):
        organizational_context.create_entry(
            db_session, schemas.OrganizationalContextInput(category=category, issue=issue), actor_id=editor.id)
    grouped = organizational_context.group_by_category(organizational_context.get_entries(db_session))
    assert list(grouped) == ["Economic", "Technological"]
    assert len(grouped["Technological"]) == 2


def test_interested_party_update_recomputes_levels(db_session, editor):
    party = interested_parties.create_interested_party(
        db_session, schemas.InterestedPartyInput(name="Staff", initial_likelihood=2, initial_severity=2), actor_id=editor.id)
    assert party.risk_level == 4
    updated = interested_parties.update_interested_party(
        db_session, party.id, schemas.InterestedPartyInput(name="Staff", initial_likelihood=5, initial_severity=5), actor_id=editor.id)
    assert updated.risk_level == 25
    assert updated.order == party.order


def test_improvement_update_keeps_date_raised(db_session, editor):
    raised = date(2024, 11, 5)
    created = improvements.create_improvement(
        db_session, schemas.ImprovementInput(category="Near Miss", type="OFI", description="Trip hazard", date_raised=raised),
        actor_id=editor.id)
    updated = improvements.update_improvement(
        db_session, created.id, schemas.ImprovementInput(category="Near Miss", type="OFI", description="Trip hazard fixed"),
        actor_id=editor.id)
    assert updated.date_raised == raised
    assert improvements.latest_number(db_session) == 1


def test_improvement_filters(db_session, editor):
    improvements.create_improvement(db_session, schemas.ImprovementInput(category="Accident", type="OFI", description="a"), actor_id=editor.id)
    improvements.create_improvement(db_session, schemas.ImprovementInput(category="Complaint", type="OFI", description="b"), actor_id=editor.id)
    assert [i.category for i in improvements.get_improvements(db_session, category="Accident")] == ["Accident"]
    assert [i.number for i in improvements.get_improvements(db_session)] == [2, 1]


def test_maintenance_filters(db_session, editor, viewer):
    due = date.today() + timedelta(days=90)
    maintenance.create_item(db_session, schemas.MaintenanceItemInput(name="Van", due_date=due, owner_id=viewer.id), actor_id=editor.id)
    maintenance.create_item(db_session, schemas.MaintenanceItemInput(name="Lift", due_date=due, completed=True), actor_id=editor.id)
    assert [i.name for i in maintenance.get_items(db_session, owner_id=viewer.id)] == ["Van"]
    assert [i.name for i in maintenance.get_items(db_session, status="completed")] == ["Lift"]
    assert [i.name for i in maintenance.get_items(db_session, status="pending")] == ["Van"]


def test_legal_lists(db_session, editor):
    first = legal.create_entry(db_session, schemas.LegalRegisterInput(title="COSHH 2002"), actor_id=editor.id)
    legal.create_entry(db_session, schemas.LegalRegisterInput(title="GDPR"), actor_id=editor.id)
    legal.approve_entry(db_session, first.id, actor_id=editor.id)
    assert [e.title for e in legal.get_entries(db_session, approved=True)] == ["COSHH 2002"]
    assert [e.title for e in legal.get_entries(db_session, approved=False)] == ["GDPR"]
    assert legal.get_entries(db_session, archived=True) == []


def test_active_users_sorted_by_name(db_session, user_factory):
    user_factory("b@example.com", name="Bob")
    user_factory("a@example.com", name="Alice")
    user_factory("z@example.com", name="Zed", active=False)
    assert [u.name for u in users.get_active_users(db_session)] == ["Alice", "Bob"]
