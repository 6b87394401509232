"""Settings and configuration management for ephemeral containers."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EPHEMERAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Docker configuration
    docker_host: str | None = Field(
        default=None,
        description="Docker daemon host URL (defaults to Docker's standard detection)",
    )

    host_ip: str = Field(
        default="127.0.0.1",
        description="Host interface the container port is published on",
    )

    stop_timeout_s: int | None = Field(
        default=None,
        description="Seconds to wait on stop before killing (engine default when unset)",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: str = Field(
        default="json",
        description="Log format (json or text)",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
