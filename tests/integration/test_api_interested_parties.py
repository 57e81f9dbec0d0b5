import uuid


def _create(client, headers, **overrides):
    body = {"name": "Customers", "initial_likelihood": 4, "initial_severity": 5,
            "residual_likelihood": 1, "residual_severity": 2}
    body.update(overrides)
    return client.post("/interested-parties", json=body, headers=headers)


def test_create_returns_action_result(client, editor, auth_headers):
    r = _create(client, auth_headers(editor))
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["data"]["risk_level"] == 20
    assert body["data"]["residual_risk_level"] == 2
    assert body["id"] == body["data"]["id"]
    assert "error_code" not in body


def test_create_from_form_body(client, editor, auth_headers):
    r = client.post(
        "/interested-parties",
        data={"name": "Neighbours", "initial_likelihood": "2", "initial_severity": "", "residual_likelihood": "bad"},
        headers=auth_headers(editor),
    )
    assert r.status_code == 201
    data = r.json()["data"]
    assert (data["initial_severity"], data["residual_likelihood"], data["risk_level"]) == (3, 3, 6)


def test_guest_mutation_is_unauthorized(client):
    r = _create(client, {})
    assert r.status_code == 401
    assert r.json() == {"success": False, "error": "Authentication required"}


def test_viewer_mutation_is_forbidden(client, viewer, auth_headers):
    r = _create(client, auth_headers(viewer))
    assert r.status_code == 403
    assert r.json()["success"] is False


def test_out_of_range_rating_is_422(client, editor, auth_headers):
    r = _create(client, auth_headers(editor), residual_severity=9)
    assert r.status_code == 422
    assert "residual_severity" in r.json()["error"]


def test_list_detail_and_archived_view(client, editor, auth_headers):
    headers = auth_headers(editor)
    first = _create(client, headers, name="A").json()["id"]
    _create(client, headers, name="B")
    listing = client.get("/interested-parties").json()
    assert [p["name"] for p in listing] == ["A", "B"]
    assert [p["order"] for p in listing] == [1, 2]
    assert client.get(f"/interested-parties/{first}").json()["name"] == "A"

    assert client.post(f"/interested-parties/{first}/archive", headers=headers).status_code == 200
    assert [p["name"] for p in client.get("/interested-parties").json()] == ["B"]
    assert [p["name"] for p in client.get("/interested-parties", params={"show_archived": True}).json()] == ["A"]
    client.post(f"/interested-parties/{first}/unarchive", headers=headers)
    assert [p["name"] for p in client.get("/interested-parties").json()] == ["A", "B"]


def test_unknown_detail_is_404(client):
    assert client.get(f"/interested-parties/{uuid.uuid4()}").status_code == 404


def test_move_endpoint(client, editor, auth_headers):
    headers = auth_headers(editor)
    _create(client, headers, name="A")
    second = _create(client, headers, name="B").json()["id"]
    r = client.post(f"/interested-parties/{second}/move", json={"direction": "up"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["data"] == {"moved": True, "direction": "up"}
    assert [p["name"] for p in client.get("/interested-parties").json()] == ["B", "A"]

    r = client.post(f"/interested-parties/{second}/move", params={"direction": "up"}, headers=headers)
    assert r.json() == {"success": True, "id": second, "data": {"moved": False, "direction": "up"}}

    r = client.post(f"/interested-parties/{second}/move", json={"direction": "diagonal"}, headers=headers)
    assert r.status_code == 422


def test_update_and_delete(client, editor, admin, auth_headers):
    party_id = _create(client, auth_headers(editor)).json()["id"]
    r = client.put(f"/interested-parties/{party_id}", json={"name": "Key customers"}, headers=auth_headers(editor))
    assert r.status_code == 200
    assert r.json()["data"]["risk_level"] == 9

    assert client.delete(f"/interested-parties/{party_id}", headers=auth_headers(editor)).status_code == 403
    assert client.delete(f"/interested-parties/{party_id}", headers=auth_headers(admin)).json() == {"success": True, "id": party_id}
    r = client.delete(f"/interested-parties/{party_id}", headers=auth_headers(admin))
    assert r.status_code == 404
    assert r.json()["success"] is False


def test_malformed_json_uses_failure_shape(client, editor, auth_headers):
    r = client.post("/interested-parties", content=b"{not json", headers={**auth_headers(editor), "content-type": "application/json"})
    assert r.status_code == 422
    assert r.json()["success"] is False
