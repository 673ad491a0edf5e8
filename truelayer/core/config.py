"""Library configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    All settings can be overridden via ``TRUELAYER_``-prefixed environment
    variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRUELAYER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Credentials
    client_id: str = ""
    client_secret: str = ""
    sandbox: bool = True

    # External APIs (None selects the hosts of the chosen environment)
    auth_base_url: str | None = None
    api_base_url: str | None = None
    request_timeout: float = 10.0

    # Demo application
    host: str = "http://localhost:3000"
    redirect_path: str = "/callback"

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
