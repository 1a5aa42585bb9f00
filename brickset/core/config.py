from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    app_name: str = "Brickset Queries"
    version: str = "0.1.0"
    data_file: Optional[Path] = None  # None -> bundled dataset
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="BRICKSET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    def known_level(cls, v):  # type: ignore[override]
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()

__all__ = ["LOG_LEVELS", "Settings", "get_settings"]
