"""
Mutating operations on the registers.

Each action checks the acting user's permission, performs the write, records
a change log row, invalidates the affected routes and returns an
``ActionResult``. Failures never escape as exceptions.
"""
from .base import ActionContext

__all__ = ["ActionContext"]
