# src/simonsays/core/config.py
from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process settings. Override via env vars, e.g.
      SIMONSAYS_LOG_LEVEL=DEBUG  SIMONSAYS_DIR_MODE=448
    """

    VERSION: str = "0.1.0"

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    # Mode for category folders created by the sort commands
    DIR_MODE: int = 0o755

    model_config = SettingsConfigDict(
        env_prefix="SIMONSAYS_",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
