"""Configuration using Pydantic Settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefix ``CHECKERS_``) and an optional .env file.

    Attributes:
        api_base_url: Base address of the game service used by the client.
        request_timeout: Seconds to wait for the game service. ``None`` waits indefinitely.
        log_level: Level of the root logger.
        database_url: Where the stand-in game service stores finished games.
        server_host: Host the stand-in game service binds to.
        server_port: Port the stand-in game service binds to.
        cors_origins: Origins allowed to call the stand-in game service.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHECKERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Client
    api_base_url: str = Field(
        default="http://localhost:8080/api",
        description="Base address of the game service",
    )
    request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Transport timeout in seconds (None: no timeout)",
    )
    log_level: str = Field(default="INFO", description="Root log level")

    # Stand-in service
    database_url: str = Field(
        default="sqlite:///./checkers.db",
        description="Database connection URL",
    )
    server_host: str = Field(default="127.0.0.1", description="Server host address")
    server_port: int = Field(default=8080, description="Server port")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the cached settings instance, loading it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
