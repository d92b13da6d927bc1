"""Library settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration, sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json

    # ── Record identifiers ──────────────────────────────────────────────────
    id_date_format: str = "%Y%m%d"
    id_sequence_modulus: int = Field(default=100000, gt=1)

    # ── Inventory reporting ─────────────────────────────────────────────────
    inventory_expiry_warning_days: int = Field(default=7, ge=0)


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
