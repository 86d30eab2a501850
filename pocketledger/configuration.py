"""Mini README: Centralised configuration for PocketLedger.

Structure:
    * PocketLedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``POCKETLEDGER_*`` environment variables
    (or a local ``.env`` file). Command line options take precedence over
    these values; the ledger itself never reads settings directly.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class PocketLedgerSettings(BaseSettings):
    """Runtime configuration for the PocketLedger menu."""

    environment: str = Field(
        "development",
        description="Environment label, surfaced in debug logging only.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level. Kept at WARNING so menu output stays readable.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts when rendering. Amounts carry no currency.",
    )
    id_length: int = Field(
        8,
        description="Number of characters in generated transaction identifiers.",
        ge=6,
        le=16,
    )

    class Config:
        env_prefix = "POCKETLEDGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: object) -> str:
        """Accept any casing of a standard logging level name."""

        name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value}")
        return name


@lru_cache()
def get_settings() -> PocketLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PocketLedgerSettings()
