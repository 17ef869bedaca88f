"""
Health Check Endpoints.

/health        liveness; answers as long as the process serves requests
/health/ready  readiness; 503 when an upload directory cannot be written
"""

import os
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from modules.backend.core.logging import get_logger
from modules.backend.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


def check_media_storage(request: Request) -> dict[str, Any]:
    """Every upload directory must exist and be writable."""
    unwritable = [
        str(target.directory)
        for target in request.app.state.media.targets.values()
        if not (target.directory.is_dir() and os.access(target.directory, os.W_OK))
    ]
    if unwritable:
        return {"status": "unhealthy", "error": f"Not writable: {', '.join(unwritable)}"}
    return {"status": "healthy"}


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Storage status plus the size of each in-memory collection."""
    state = request.app.state
    checks = {
        "media_storage": check_media_storage(request),
        "users": {"status": "healthy", "count": await state.users.count()},
        "notes": {"status": "healthy", "count": await state.notes.count()},
    }
    ready = all(check["status"] == "healthy" for check in checks.values())
    if not ready:
        logger.warning("Readiness check failed", extra={"checks": checks})

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "healthy" if ready else "unhealthy",
            "checks": checks,
            "timestamp": utc_now().isoformat(),
        },
    )
