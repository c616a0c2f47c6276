from pathlib import Path
from typing import Optional, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =========================
# Configuration (ENV-DRIVEN via Pydantic)
# =========================


class Settings(BaseSettings):
    """Repository settings read from environment and validated by Pydantic.

    Only a single `.env` file at the project root is read. Real environment
    variables always take precedence over `.env` values.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=str(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
    )

    # Backend selection
    remote_source: Literal["REST", "MEMORY"] = Field(default="MEMORY", alias="REMOTE_SOURCE")
    local_source: Literal["SQL", "MEMORY"] = Field(default="SQL", alias="LOCAL_SOURCE")

    # Remote (REST)
    api_base_url: str = Field(default="", alias="TASKS_API_BASE_URL")
    request_timeout_seconds: float = Field(default=10.0, gt=0, alias="REQUEST_TIMEOUT_SECONDS")
    remote_latency_seconds: float = Field(default=0.0, ge=0, alias="REMOTE_LATENCY_SECONDS")

    # Local (SQL)
    db_url: str = Field(default="sqlite:///tasks.sqlite3", alias="LOCAL_DB_URL")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")

    @field_validator("remote_source", "local_source", "log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


# Singleton accessor to avoid repeated disk reads/parsing
_settings_singleton: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the singleton Settings instance, initializing it on first call."""
    global _settings_singleton
    if _settings_singleton is None:
        _settings_singleton = Settings()
    return _settings_singleton
