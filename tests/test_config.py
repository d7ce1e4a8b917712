"""Unit tests for configuration, logging setup and the /health endpoint."""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient


class TestSettings:
    """Settings loading via pydantic-settings."""

    def test_settings_defaults(self) -> None:
        """Given no backend env vars, defaults are applied correctly."""
        from social_analyzer.core.config import Settings

        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)

        assert s.BACKEND_API_URL == "http://localhost:5000"
        assert s.BACKEND_API_VERSION == "v1"
        assert s.BACKEND_TIMEOUT_SECONDS == 60.0
        assert s.ALLOWED_ORIGINS == "*"
        assert s.LOG_LEVEL == "INFO"

    def test_settings_loads_env_overrides(self) -> None:
        """Given env vars are set, settings picks them up case-insensitively."""
        env_overrides = {
            "backend_api_url": "https://analyzer.example.com/",
            "BACKEND_API_VERSION": "v2",
            "BACKEND_TIMEOUT_SECONDS": "15",
        }
        with patch.dict("os.environ", env_overrides, clear=False):
            from social_analyzer.core.config import Settings

            s = Settings(_env_file=None)

        assert s.backend_base_url == "https://analyzer.example.com/api/v2"
        assert s.BACKEND_TIMEOUT_SECONDS == 15.0

    def test_backend_endpoint_joins_paths(self) -> None:
        from social_analyzer.core.config import Settings

        s = Settings(_env_file=None, BACKEND_API_URL="http://backend.test", BACKEND_API_VERSION="v1")

        assert s.backend_endpoint("/scrape") == "http://backend.test/api/v1/scrape"
        assert s.backend_endpoint("analyze") == "http://backend.test/api/v1/analyze"
        assert s.backend_endpoint("") == "http://backend.test/api/v1"


class TestHealthEndpoint:
    """GET /health reports backend reachability."""

    def test_health_connected(
        self, test_client: TestClient, mock_backend_up: MagicMock
    ) -> None:
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "backend": "connected"}

    def test_health_disconnected(
        self, test_client: TestClient, mock_backend_down: MagicMock
    ) -> None:
        response = test_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "degraded"
        assert body["backend"] == "disconnected"


class TestLogging:
    """Structured logging configuration."""

    def test_setup_logging_configures_root_logger(self) -> None:
        """Given setup_logging is called, root logger has one structured handler."""
        import logging

        from social_analyzer.core.logging import setup_logging

        setup_logging()
        setup_logging()
        root = logging.getLogger()
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert handler.formatter is not None
        fmt = handler.formatter._fmt
        assert "%(levelname)" in fmt
        assert "%(asctime)" in fmt
        assert "%(name)" in fmt
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        import logging

        from social_analyzer.core.logging import setup_logging

        with patch("social_analyzer.core.logging.settings") as mock_settings:
            mock_settings.LOG_LEVEL = "chatty"
            setup_logging()

        assert logging.getLogger().level == logging.INFO
