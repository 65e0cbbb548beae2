"""Application configuration settings."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


class Settings(BaseSettings):
    """Service settings, read from VIDEOHUB_* environment variables.

    Attributes:
        host: Interface uvicorn binds to.
        port: Port uvicorn listens on.
        cors_origins: Origins allowed by the CORS middleware, given as a
            JSON list in VIDEOHUB_CORS_ORIGINS.
        seed_sample: Insert the sample video at startup.
        log_level: uvicorn / logging level name.
    """

    model_config = SettingsConfigDict(
        env_prefix="VIDEOHUB_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    # Server
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    # CORS
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS

    # Startup
    seed_sample: bool = False
    log_level: str = "info"

    @field_validator("log_level")
    @classmethod
    def lower_log_level(cls, v: str) -> str:
        """uvicorn expects lowercase level names."""
        return v.strip().lower()
