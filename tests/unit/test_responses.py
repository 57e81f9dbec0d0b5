from ims.api.responses import action_body, status_for
from ims.db.schemas import ActionResult


def test_status_for_each_failure_kind():
    expected = {"unauthorized": 401, "forbidden": 403, "not_found": 404, "validation": 422, "storage": 500}
    for code, http_status in expected.items():
        assert status_for(ActionResult.failure("x", code)) == http_status
    assert status_for(ActionResult.failure("x", "mystery")) == 400


def test_status_for_success_uses_given_status():
    assert status_for(ActionResult.ok()) == 200
    assert status_for(ActionResult.ok(), success_status=201) == 201


def test_action_body_drops_unset_keys_only_at_top_level():
    body = action_body(ActionResult.ok(data={"description": None, "name": "x"}))
    assert body == {"success": True, "data": {"description": None, "name": "x"}}
    failure = action_body(ActionResult.failure("Not allowed", "forbidden"))
    assert failure == {"success": False, "error": "Not allowed"}
