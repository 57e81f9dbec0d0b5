"""
App assembly entry point.

Re-exports the FastAPI `app` from `ims.api.main` so `uvicorn app:app` works
from the project root.
"""

from ims.api.main import app  # noqa: F401
