"""Health & Readiness Probes — process liveness and session list readiness.

Invariants:
    - GET /health/ answers 200 whenever the process can serve requests
    - GET /health/ready answers 503 while the runtime is missing or stopped,
      or when its database does not answer SELECT 1
    - Readiness never raises: every failure is reported in the body

Design Decisions:
    - A runtime without a database (in-memory store) reports the database
      check as "not_configured" and is ready as long as its scope is live
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "session-list-api"
SERVICE_VERSION = "1.0.0"


def _not_ready(reason: str) -> JSONResponse:
    logger.warning(f"Readiness check failed: {reason}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/ready")
async def readiness_check(request: Request):
    runtime = getattr(request.app.state, "session_list", None)
    if runtime is None or not runtime.scope.is_active:
        return _not_ready("session_list_stopped")

    if runtime.db is None:
        database = "not_configured"
    elif await runtime.db.health_check():
        database = "healthy"
    else:
        return _not_ready("database_unavailable")
    return {"status": "ready", "checks": {"database": database}}
