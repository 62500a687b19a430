"""Mini README: Centralised configuration models and helpers for Financemap.

Structure:
    * FinancemapSettings - pydantic settings model describing runtime options.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``FINANCEMAP_*`` environment variables
    (or a local ``.env``) for the HTTP bind address, the log level and the
    period the interfaces offer by default. Nothing here is persisted; the
    ledger itself always lives in process memory.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .reporting.periods import Period


class FinancemapSettings(BaseSettings):
    """Runtime configuration for the Financemap interfaces."""

    model_config = SettingsConfigDict(
        env_prefix="FINANCEMAP_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface the HTTP service binds to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logger level name (DEBUG, INFO, WARNING, ...).",
    )
    default_period: str = Field(
        Period.MONTHLY.value,
        description="Period preselected by the console and HTTP report views.",
    )
    seed_demo_data: bool = Field(
        False,
        description="Seed the HTTP application's ledger with demo transactions.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        """Accept any casing but insist on a level the logging module knows."""

        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("default_period")
    @classmethod
    def _check_default_period(cls, value: str) -> str:
        """Reject period names the resolver would not accept."""

        return Period.from_name(value).value


@lru_cache()
def get_settings() -> FinancemapSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FinancemapSettings()
