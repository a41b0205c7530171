"""
paxsheets API configuration.

Every knob is an environment variable (or a line in .env), parsed and
validated by pydantic-settings. get_settings() reads them once per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from attendance.logging_config import parse_level


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """
    Environment-driven settings for the API.

    Defaults work for a local checkout with the front end on its dev port.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # === Resolution ===
    alias_overrides_file: Path | None = Field(
        default=None,
        description="Optional JSON file of extra alias overrides, merged after the built-in table",
    )
    skip_role_labels: bool = Field(
        default=False,
        description="Drop role labels (Q:, VQ, PAX:) and bare counts/dates instead of reporting them as unknown PAX",
    )
    resolver_cache_size: int = Field(
        default=32,
        ge=0,
        description="Number of per-roster resolvers kept in memory (0 disables caching)",
    )

    # === Roster ===
    # Comma-separated in the environment; see roster_exclusion_markers
    roster_exclusion_markers_str: str = Field(
        default="(Archived),(<18)",
        alias="ROSTER_EXCLUSION_MARKERS",
        description="Roster names containing any of these markers are excluded (comma-separated)",
    )

    # === CORS ===
    allowed_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="ALLOWED_ORIGINS",
        description="Origins allowed to call the API (comma-separated)",
    )

    # === Logging ===
    log_level: str = Field(
        default="INFO",
        description="Log level: TRACE, DEBUG, INFO, WARNING or ERROR",
    )

    @field_validator("alias_overrides_file", mode="before")
    @classmethod
    def blank_overrides_file_is_unset(cls, v: str | Path | None) -> str | Path | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names logging_config does not know."""
        level = v.strip().upper()
        if parse_level(level, default=-1) == -1:
            raise ValueError(f"Invalid LOG_LEVEL: {level}. Must be TRACE, DEBUG, INFO, WARNING or ERROR")
        return level

    @property
    def roster_exclusion_markers(self) -> tuple[str, ...]:
        return tuple(_split_csv(self.roster_exclusion_markers_str))

    @property
    def allowed_origins(self) -> list[str]:
        return _split_csv(self.allowed_origins_str)


@lru_cache
def get_settings() -> Settings:
    """Settings for this process, read from the environment on first call."""
    return Settings()
