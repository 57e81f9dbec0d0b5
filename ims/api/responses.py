"""
Map action results onto HTTP responses.
"""
from fastapi.responses import JSONResponse

from ims.db.schemas import ActionResult

_STATUS_BY_CODE = {
    "unauthorized": 401,
    "forbidden": 403,
    "not_found": 404,
    "validation": 422,
    "storage": 500,
}


def status_for(result: ActionResult, success_status: int = 200) -> int:
    if result.success:
        return success_status
    return _STATUS_BY_CODE.get(result.error_code or "", 400)


def action_body(result: ActionResult) -> dict:
    """Serialized result with unset optional keys left out."""
    body = result.model_dump(mode="json")
    return {key: value for key, value in body.items() if key == "success" or value is not None}


def action_response(result: ActionResult, success_status: int = 200) -> JSONResponse:
    return JSONResponse(content=action_body(result), status_code=status_for(result, success_status))
