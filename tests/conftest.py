"""Shared test fixtures.

Provides a ``test_client`` for FastAPI, a mock ``httpx.AsyncClient`` and
sample analysis payloads for use across all test modules.
"""

from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def mock_http_client() -> Generator[AsyncMock, None, None]:
    """Patch ``httpx.AsyncClient`` so backend calls never leave the process.

    Tests set ``mock_http_client.post`` / ``.get`` to control responses.
    """
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)
        mock_client_class.return_value = mock_client
        yield mock_client


@pytest.fixture()
def mock_backend_up() -> Generator[MagicMock, None, None]:
    """Patch the health router's backend check to report reachable."""
    with patch(
        "social_analyzer.routers.health.check_backend",
        new=AsyncMock(return_value=True),
    ) as backend_check:
        yield backend_check


@pytest.fixture()
def mock_backend_down() -> Generator[MagicMock, None, None]:
    """Patch the health router's backend check to report unreachable."""
    with patch(
        "social_analyzer.routers.health.check_backend",
        new=AsyncMock(return_value=False),
    ) as backend_check:
        yield backend_check


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient."""
    from social_analyzer.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture()
def analysis_payload() -> dict[str, Any]:
    """Backend ``/analyze`` response without a sentiment distribution."""
    return {
        "keywords": [
            {"word": "ai", "count": 120},
            {"word": "http", "count": 90},
        ],
        "hashtags": [
            {"tag": "#ai", "count": 10},
            {"tag": "#tech", "count": 5},
        ],
        "sentiment": {"score": 0.8, "sentiment": "positive"},
    }


def _make_response(
    status_code: int,
    *,
    json: Any = None,
    content: bytes | None = None,
    url: str = "http://backend.test/api/v1/analyze",
) -> httpx.Response:
    """Build a real ``httpx.Response`` bound to a request."""
    request = httpx.Request("POST", url)
    if content is not None:
        return httpx.Response(status_code, content=content, request=request)
    return httpx.Response(status_code, json=json, request=request)


@pytest.fixture()
def make_response() -> Callable[..., httpx.Response]:
    """Factory for real ``httpx.Response`` objects."""
    return _make_response
