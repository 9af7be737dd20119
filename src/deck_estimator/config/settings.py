"""Runtime settings loaded from the environment (``DECK_ESTIMATOR_*``)."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EstimatorSettings(BaseSettings):
    """Session defaults and service options."""

    model_config = SettingsConfigDict(
        env_prefix="DECK_ESTIMATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Session defaults ─────────────────────────────────
    default_project_type: str = "event"
    default_slides_count: int = Field(default=20, ge=0)
    default_renders_count: int = Field(default=0, ge=0)
    default_deadline_days: int = Field(default=14, ge=0)

    # ── Service ──────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> EstimatorSettings:
    """Cached settings instance."""
    return EstimatorSettings()
