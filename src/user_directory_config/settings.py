"""Settings for the user directory API, CLI and outbox relay.

Values are read from the process environment first, then from one env file,
then fall back to the defaults below. The env file is the first that exists
of: ``$USER_DIRECTORY_ENV_FILE``, ``config/.env.dev``, ``config/.env``.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "USER_DIRECTORY_ENV_FILE"
ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _project_root() -> Path:
    here = Path(__file__).resolve()
    for directory in here.parents:
        if (directory / "config").is_dir() or (directory / ".git").is_dir():
            return directory
    # Installed layout: <root>/src/user_directory_config/settings.py
    return here.parents[2]


def get_config_dir() -> Path:
    """Directory holding the env files (``<project root>/config``)."""
    return _project_root() / "config"


def _env_file() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        candidate = Path(explicit)
        if not candidate.is_absolute():
            candidate = _project_root() / candidate
        if candidate.exists():
            return candidate

    for name in ENV_FILE_CANDIDATES:
        candidate = get_config_dir() / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Runtime configuration; every field maps to the upper-cased env var."""

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "User Directory"
    debug: bool = False

    # Storage. DB_URL takes precedence over the POSTGRES_* parts.
    db_url: str | None = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr | None = None
    postgres_db: str = "users"

    # HTTP
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_debug: bool = Field(default=False, description="Expose /docs and /redoc")
    api_cors_origins: str = Field(
        default="",
        description="Comma-separated allowed origins; empty disables CORS",
    )

    # Events
    events_enabled: bool = True
    event_delivery: Literal["direct", "outbox"] = Field(
        default="direct",
        description=(
            "direct: publish after commit, best-effort. "
            "outbox: store in outbox_events for `user-directory outbox relay`"
        ),
    )
    kafka_rest_url: str = "http://localhost:8082"
    kafka_topic: str = "user-events"
    kafka_timeout: float = 10.0

    # Outbox relay
    outbox_batch_size: int = 100
    outbox_poll_interval: float = 5.0
    outbox_max_attempts: int = 10

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.db_url:
            return self.db_url
        credentials = self.postgres_user
        if self.postgres_password is not None:
            credentials += f":{self.postgres_password.get_secret_value()}"
        return (
            f"postgresql+asyncpg://{credentials}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        origins = (part.strip() for part in self.api_cors_origins.split(","))
        return [origin for origin in origins if origin]

    @property
    def uses_outbox(self) -> bool:
        return self.event_delivery == "outbox"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
