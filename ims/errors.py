"""
Error taxonomy for record actions.

Actions raise these internally; `ims.actions.base.run_action` converts them
into a uniform failure result before anything reaches the HTTP layer.
"""
from __future__ import annotations


class RecordsError(Exception):
    """Base class for expected failures of a record action."""

    code = "error"
    default_message = "Operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(RecordsError):
    code = "unauthorized"
    default_message = "Unauthorized"


class Forbidden(Unauthorized):
    """Actor is known but lacks the permission for the action."""

    code = "forbidden"
    default_message = "Forbidden"


class NotFound(RecordsError):
    code = "not_found"
    default_message = "Record not found"


class ValidationFailure(RecordsError, ValueError):
    """Also a ValueError so pydantic validators surface it as a field error."""

    code = "validation"
    default_message = "Invalid input"


class StorageFailure(RecordsError):
    code = "storage"
    default_message = "Storage operation failed"


__all__ = [
    "RecordsError",
    "Unauthorized",
    "Forbidden",
    "NotFound",
    "ValidationFailure",
    "StorageFailure",
]
