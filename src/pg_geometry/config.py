"""Runtime configuration for pg-geometry tooling."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings, resolved explicitly by the application."""

    model_config = SettingsConfigDict(env_prefix="PG_GEOMETRY_", env_file=".env", extra="ignore")

    app_name: str = "pg-geometry"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    database_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PG_GEOMETRY_DATABASE_URL", "PG_DATABASE_URL", "DATABASE_URL"),
        description="Connection string handed to the transport layer that sends predicates to PostgreSQL.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
