"""Mini README: Centralised configuration for Spendwise.

Structure:
    * SpendwiseSettings - pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the CLI and web interface.

Usage:
    Every field can be overridden with a ``SPENDWISE_`` prefixed environment
    variable or a ``.env`` file, e.g. ``SPENDWISE_INTERFACE_PORT=9000``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SpendwiseSettings(BaseSettings):
    """Runtime configuration for the ledger engine and its interfaces."""

    model_config = SettingsConfigDict(
        env_prefix="SPENDWISE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP API to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP API exposes.",
        ge=1,
        le=65535,
    )
    seed_demo_data: bool = Field(
        True,
        description="Populate a fresh engine with sample transactions, budgets and goals.",
    )
    currency_symbol: str = Field(
        "₹",
        description="Symbol used when rendering amounts in CLI summaries.",
    )
    regret_risk_threshold: float = Field(
        0.8,
        description="Risk score above which regret checks return a caution message.",
        ge=0.0,
        le=1.0,
    )
    neutral_regret_risk: float = Field(
        0.5,
        description="Risk reported for categories that have no budget.",
        ge=0.0,
        le=1.0,
    )
    advice_random_seed: Optional[int] = Field(
        None,
        description="Seed for advisory message selection; unset for non-deterministic picks.",
    )
    log_level: str = Field("INFO", description="Root logging level name.")

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing for standard logging level names."""

        normalised = value.strip().upper()
        if normalised not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> SpendwiseSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SpendwiseSettings()
