import uuid
from datetime import date, timedelta


def test_organisational_context_listing_groups_by_category(client, editor, auth_headers):
    headers = auth_headers(editor)
    for category, issue in (("Technological", "Cyber"), ("Economic", "Inflation")):
        r = client.post("/organisational-context", json={"category": category, "issue": issue, "initial_likelihood": 5,
                                                         "initial_severity": 3}, headers=headers)
        assert r.status_code == 201
        assert r.json()["data"]["initial_risk_level"] == 15
        assert r.json()["data"]["initial_risk_band"] == "high"
        assert r.json()["data"]["residual_risk_band"] == "medium"
    listing = client.get("/organisational-context").json()
    assert len(listing["entries"]) == 2
    assert list(listing["by_category"]) == ["Economic", "Technological"]
    filtered = client.get("/organisational-context", params={"category": "Economic"}).json()
    assert [e["issue"] for e in filtered["entries"]] == ["Inflation"]


def test_organisational_context_toggle_archive(client, editor, auth_headers):
    headers = auth_headers(editor)
    entry_id = client.post("/organisational-context", json={"category": "Legal", "issue": "New regs"}, headers=headers).json()["id"]
    assert client.post(f"/organisational-context/{entry_id}/toggle-archive", headers=headers).json()["data"]["archived"] is True
    assert client.get("/organisational-context").json()["entries"] == []
    assert len(client.get("/organisational-context", params={"include_archived": True}).json()["entries"]) == 1


def test_improvement_register_listing(client, editor, auth_headers):
    headers = auth_headers(editor)
    client.post("/improvement-register", json={"category": "Complaint", "type": "OFI", "description": "open"}, headers=headers)
    r = client.post("/improvement-register",
                    json={"category": "Accident", "type": "Non Conformance", "description": "done", "date_completed": "2025-02-01"},
                    headers=headers)
    assert r.json()["data"]["number"] == 2
    listing = client.get("/improvement-register").json()
    assert [i["description"] for i in listing["open"]] == ["open"]
    assert [i["description"] for i in listing["completed"]] == ["done"]
    assert listing["latest_number"] == 2


def test_improvement_invalid_category(client, editor, auth_headers):
    r = client.post("/improvement-register", json={"category": "Weather", "type": "OFI", "description": "x"},
                    headers=auth_headers(editor))
    assert r.status_code == 422


def test_improvement_restore(client, editor, auth_headers):
    headers = auth_headers(editor)
    improvement_id = client.post("/improvement-register", json={"category": "Complaint", "type": "OFI", "description": "x"},
                                 headers=headers).json()["id"]
    client.post(f"/improvement-register/{improvement_id}/archive", headers=headers)
    assert client.get("/improvement-register", params={"show_archived": True}).json()["open"][0]["id"] == improvement_id
    assert client.post(f"/improvement-register/{improvement_id}/restore", headers=headers).json()["data"]["archived"] is False


def test_audit_schedule_form_body_and_next_audit(client, editor, auth_headers):
    headers = auth_headers(editor)
    r = client.post(
        "/audit-schedule",
        data={
            "title": "Supplier audit",
            "procedures": "Procedure No 1 Planning & Review",
            "planned_start_date": "2025-05-01",
            "date_completed": "2025-05-02",
            "create_next_audit": "on",
            "next_audit_date": "2026-05-01",
            "auditor_id": "",
        },
        headers=headers,
    )
    assert r.status_code == 201
    data = r.json()["data"]
    assert data["audit"]["status"] == "completed"
    assert data["next_audit"]["planned_start_date"] == "2026-05-01"
    assert len(client.get("/audit-schedule").json()) == 2
    options = client.get("/audit-schedule/document-options").json()
    assert "Integrated Manual" in options["manual"]


def test_audit_detail_includes_documents(client, editor, auth_headers):
    headers = auth_headers(editor)
    audit_id = client.post("/audit-schedule", json={"title": "Annual"}, headers=headers).json()["id"]
    r = client.post(f"/audit-schedule/{audit_id}/documents", json={"filename": "plan.pdf", "storage_key": "a/plan.pdf"},
                    headers=headers)
    assert r.status_code == 201
    detail = client.get(f"/audit-schedule/{audit_id}").json()
    assert [d["filename"] for d in detail["documents"]] == ["plan.pdf"]
    document_id = detail["documents"][0]["id"]
    assert client.get(f"/documents/{document_id}").json()["storage_key"] == "a/plan.pdf"
    listed = client.get("/documents", params={"audit_id": audit_id}).json()
    assert [d["id"] for d in listed] == [document_id]
    assert client.get("/documents", params={"maintenance_item_id": str(uuid.uuid4())}).json() == []

    assert client.delete(f"/documents/{document_id}", headers=headers).status_code == 403


def test_maintenance_listing_groups(client, editor, auth_headers):
    headers = auth_headers(editor)
    due = (date.today() + timedelta(days=5)).isoformat()
    client.post("/maintenance", json={"name": "Forklift", "due_date": due, "sub_category": "Vehicles"}, headers=headers)
    client.post("/maintenance", json={"name": "Scales", "category": "calibration", "due_date": due}, headers=headers)
    listing = client.get("/maintenance").json()
    assert [i["name"] for i in listing["maintenance_items"]] == ["Forklift"]
    assert [i["name"] for i in listing["calibration_items"]] == ["Scales"]
    assert listing["closed_maintenance_items"] == listing["closed_calibration_items"] == []
    assert listing["sub_categories"] == ["Vehicles"]
    assert listing["maintenance_items"][0]["due_status"] == "due_soon"


def test_maintenance_missing_due_date(client, editor, auth_headers):
    r = client.post("/maintenance", json={"name": "Forklift"}, headers=auth_headers(editor))
    assert r.status_code == 422
    assert "due_date" in r.json()["error"]


def test_legal_register_flow(client, editor, admin, auth_headers):
    headers = auth_headers(editor)
    entry_id = client.post("/legal-register", json={"title": "Environmental Protection Act 1990"}, headers=headers).json()["id"]
    assert [e["id"] for e in client.get("/legal-register").json()["unapproved"]] == [entry_id]
    client.post(f"/legal-register/{entry_id}/approve", headers=headers)
    r = client.post(f"/legal-register/{entry_id}/reviews", json={"review_date": "2025-03-01", "notes": "ok"}, headers=headers)
    assert r.status_code == 201
    listing = client.get("/legal-register").json()
    assert listing["approved"][0]["latest_review"]["review_date"] == "2025-03-01"
    client.post(f"/legal-register/{entry_id}/archive", headers=headers)
    assert [e["id"] for e in client.get("/legal-register").json()["archived"]] == [entry_id]
    assert client.delete(f"/legal-register/{entry_id}", headers=auth_headers(admin)).status_code == 200
    assert client.get(f"/legal-register/{entry_id}").status_code == 404


def test_unknown_ids_on_mutations(client, admin, auth_headers):
    headers = auth_headers(admin)
    missing = uuid.uuid4()
    assert client.post(f"/maintenance/{missing}/archive", headers=headers).status_code == 404
    assert client.post(f"/legal-register/{missing}/approve", headers=headers).status_code == 404
    assert client.delete(f"/audit-schedule/{missing}", headers=headers).status_code == 404
    assert client.delete(f"/documents/{missing}", headers=headers).status_code == 404
