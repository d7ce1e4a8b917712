"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Analysis backend (scrape + analyze)
    BACKEND_API_URL: str = "http://localhost:5000"
    BACKEND_API_VERSION: str = "v1"
    BACKEND_TIMEOUT_SECONDS: float = 60.0

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def backend_base_url(self) -> str:
        """Full API base, e.g. ``http://host/api/v1``."""
        return f"{self.BACKEND_API_URL.rstrip('/')}/api/{self.BACKEND_API_VERSION}"

    def backend_endpoint(self, path: str) -> str:
        """Join *path* onto the API base, with or without a leading slash."""
        if path and not path.startswith("/"):
            path = f"/{path}"
        return f"{self.backend_base_url}{path}"


settings = Settings()
