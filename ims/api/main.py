"""
FastAPI app assembly: logging, middleware and router wiring.
Includes the few endpoints that span registers (health, user-info).
"""
import logging
import os
from typing import Optional

from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)


from ims.api.audits import router as audits_router
from ims.api.changelog import router as changelog_router
from ims.api.deps import get_current_user
from ims.api.documents import router as documents_router
from ims.api.improvements import router as improvements_router
from ims.api.interested_parties import router as interested_parties_router
from ims.api.legal import router as legal_router
from ims.api.maintenance import router as maintenance_router
from ims.api.organizational_context import router as organizational_context_router
from ims.api.permissions import can_delete, can_write
from ims.api.responses import action_body
from ims.api.users import router as users_router
from ims.db import models, schemas
from ims.utils.runtime import dev_mode_active

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="IMS Records Service",
    description="API for the management-system registers: audits, improvements, interested parties, "
                "organisational context, maintenance and the legal register.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

_DEFAULT_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
]


def _cors_origins():
    raw = os.getenv("CORS_ORIGINS", "")
    configured = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return configured or _DEFAULT_ORIGINS


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests in the same shape as failed actions."""
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{loc}: {err.get('msg', 'invalid value')}" if loc else err.get("msg", "invalid value"))
    result = schemas.ActionResult.failure("; ".join(messages) or "Invalid request", "validation")
    return JSONResponse(action_body(result), status_code=422)


@app.get("/user-info")
def get_user_info(user: Optional[models.User] = Depends(get_current_user)):
    """
    Return the signed-in user and what they may do.
    - Dev mode (DEV_MODE=true): the dev admin.
    - Normal mode: identity from proxy headers; guests get authenticated=false.
    """
    if user is None:
        return {"authenticated": False, "can_write": False, "can_delete": False}
    return {
        "authenticated": True,
        "user": schemas.User.model_validate(user).model_dump(mode="json"),
        "can_write": can_write(user),
        "can_delete": can_delete(user),
    }


@app.get("/dev-mode")
def get_dev_mode():
    try:
        return {"dev_mode": dev_mode_active()}
    except RuntimeError as exc:
        logger.error("DEV_MODE misconfiguration detected: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="DEV_MODE misconfigured")


app.include_router(audits_router)
app.include_router(improvements_router)
app.include_router(interested_parties_router)
app.include_router(organizational_context_router)
app.include_router(maintenance_router)
app.include_router(legal_router)
app.include_router(documents_router)
app.include_router(users_router)
app.include_router(changelog_router)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "ims-records"}
