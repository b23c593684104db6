"""
Configuration settings for the employee store.

Uses Pydantic Settings to load environment variables for the valid
department set, query defaults, and logging.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DEPARTMENTS = ("IT", "HR", "Finance", "Marketing", "Sales")


class Settings(BaseSettings):
    # Store
    valid_departments: List[str] = Field(
        default_factory=lambda: list(DEFAULT_DEPARTMENTS), alias="VALID_DEPARTMENTS"
    )
    default_top_k: int = Field(5, alias="DEFAULT_TOP_K")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")
    log_file: Optional[str] = Field(None, alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("valid_departments")
    @classmethod
    def _departments_not_empty(cls, value: List[str]) -> List[str]:
        cleaned = [dept.strip() for dept in value if dept and dept.strip()]
        if not cleaned:
            raise ValueError("valid_departments must name at least one department")
        return cleaned

    @field_validator("default_top_k")
    @classmethod
    def _top_k_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("default_top_k must be positive")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_DEPARTMENTS", "Settings", "get_settings"]
