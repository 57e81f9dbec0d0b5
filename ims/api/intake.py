"""
Request body intake shared by the register routers.

Create/update endpoints accept either JSON or form-encoded bodies; both are
reduced to a plain dict and validated by the action's input struct.
"""
import json
from typing import Any, Dict, Iterable

from fastapi import Request
from fastapi.exceptions import RequestValidationError

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _body_error(message: str) -> RequestValidationError:
    return RequestValidationError([{"type": "value_error", "loc": ("body",), "msg": message, "input": None}])


def form_to_dict(form, list_fields: Iterable[str] = ()) -> Dict[str, Any]:
    """Flatten form data; blank values become None, repeated keys become lists."""
    list_fields = set(list_fields)
    payload: Dict[str, Any] = {}
    for key in form.keys():
        values = [v for v in form.getlist(key) if not (isinstance(v, str) and v == "")]
        if key in list_fields:
            payload[key] = values
        elif len(values) > 1:
            payload[key] = values
        else:
            payload[key] = values[0] if values else None
    return payload


def body_payload(*list_fields: str):
    """Build a dependency reading the request body as a dict."""
    async def dependency(request: Request) -> Dict[str, Any]:
        content_type = (request.headers.get("content-type") or "").split(";")[0].strip().lower()
        if content_type in _FORM_TYPES:
            form = await request.form()
            return form_to_dict(form, list_fields)
        raw = await request.body()
        if not raw:
            return {}
        try:
            payload = json.loads(raw)
        except ValueError:
            raise _body_error("Body must be JSON or form data")
        if not isinstance(payload, dict):
            raise _body_error("Body must be an object")
        return payload
    return dependency


json_or_form = body_payload()
