"""HTTP client for the scraping / analysis backend.

The backend exposes two calls used in sequence by a search:
``POST /scrape`` returns raw posts, ``POST /analyze`` turns them into an
analysis payload.  Both go through ``httpx`` async requests; any transport,
status or decoding failure is raised as ``BackendError``.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from social_analyzer.core.config import settings
from social_analyzer.models.search import SearchRequest

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred"


class BackendError(Exception):
    """Raised when a backend call fails or returns an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(exc: Exception) -> str:
    """Prefer the backend's own ``message`` field, then the exception text."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    return str(exc) or DEFAULT_ERROR_MESSAGE


async def _post(path: str, payload: dict[str, Any]) -> Any:
    """POST *payload* to a backend endpoint and return the decoded JSON."""
    url = settings.backend_endpoint(path)
    try:
        async with httpx.AsyncClient(timeout=settings.BACKEND_TIMEOUT_SECONDS) as client:
            response = await client.post(url, json=payload)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as exc:
        logger.error(
            "backend_request_failed",
            extra={
                "url": url,
                "status_code": exc.response.status_code,
                "error_message": str(exc),
            },
        )
        raise BackendError(_error_message(exc), exc.response.status_code) from exc
    except (httpx.HTTPError, json.JSONDecodeError) as exc:
        logger.error(
            "backend_request_failed",
            extra={"url": url, "error_message": str(exc)},
        )
        raise BackendError(_error_message(exc)) from exc


async def scrape(request: SearchRequest) -> Any:
    """Ask the backend to collect posts for a keyword on a platform."""
    return await _post("/scrape", request.model_dump(mode="json"))


async def analyze(posts: Any) -> Any:
    """Send scraped posts to the backend for keyword / sentiment analysis."""
    return await _post("/analyze", {"posts": posts})


async def check_backend() -> bool:
    """Return True if the backend answers at all (any HTTP status)."""
    try:
        async with httpx.AsyncClient(timeout=5.0) as client:
            await client.get(settings.BACKEND_API_URL)
    except httpx.HTTPError:
        logger.warning("Health check: backend unreachable", exc_info=True)
        return False
    return True
