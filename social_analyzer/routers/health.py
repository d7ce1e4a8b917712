"""Health check endpoint.

Returns service status including reachability of the analysis backend.
"""

import logging
from typing import Any

from fastapi import APIRouter
from starlette.responses import JSONResponse

from social_analyzer.services.backend import check_backend

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check() -> Any:
    """Return 200 when the backend is reachable, 503 otherwise."""
    backend_status = "connected" if await check_backend() else "disconnected"

    payload: dict[str, str] = {
        "status": "ok" if backend_status == "connected" else "degraded",
        "backend": backend_status,
    }

    if backend_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
