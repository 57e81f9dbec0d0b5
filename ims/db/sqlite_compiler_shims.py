"""SQLite compilation shim for PostgreSQL JSONB.

Lets `Base.metadata.create_all()` succeed on the in-memory SQLite database
used by the test suite. JSONB operators and indexing are not emulated.

Usage: Imported for side-effects by ims.db.models.
"""
from __future__ import annotations

from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.compiler import compiles


@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(element, compiler, **kw):  # pragma: no cover - trivial
    return "JSON"
