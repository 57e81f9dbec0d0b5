def test_user_info_for_guest_and_signed_in(client, editor, auth_headers):
    assert client.get("/user-info").json() == {"authenticated": False, "can_write": False, "can_delete": False}
    info = client.get("/user-info", headers=auth_headers(editor)).json()
    assert info["authenticated"] is True
    assert info["user"]["email"] == "editor@example.com"
    assert (info["can_write"], info["can_delete"]) == (True, False)


def test_users_me_requires_identity(client, viewer, auth_headers):
    assert client.get("/users/me").status_code == 401
    me = client.get("/users/me", headers=auth_headers(viewer)).json()
    assert me["role"] == "viewer"
    assert me["can_write"] is False


def test_users_list_and_role_change(client, admin, viewer, auth_headers):
    names = [u["name"] for u in client.get("/users", headers=auth_headers(viewer)).json()]
    assert names == ["Ada Admin", "Vera Viewer"]
    r = client.patch(f"/users/{viewer.id}", json={"role": "editor"}, headers=auth_headers(admin))
    assert r.status_code == 200
    assert r.json()["data"]["role"] == "editor"
    r = client.patch(f"/users/{admin.id}", json={"role": "superuser"}, headers=auth_headers(admin))
    assert r.status_code == 422


def test_change_log_is_admin_only(client, admin, editor, auth_headers):
    client.post("/legal-register", json={"title": "WEEE Regulations"}, headers=auth_headers(editor))
    assert client.get("/change-log", headers=auth_headers(editor)).status_code == 403
    assert client.get("/change-log").status_code == 401
    entries = client.get("/change-log", headers=auth_headers(admin), params={"target_type": "legal_register"}).json()
    assert [(e["action_type"], e["status"]) for e in entries] == [("create", "success")]
    assert entries[0]["metadata"] == {"title": "WEEE Regulations"}


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"
