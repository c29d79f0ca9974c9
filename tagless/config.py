"""Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Only the service layer reads settings; core receives values as arguments
    - get_settings() is cached (lru_cache): one instance per process
    - max_decode_depth stays below the interpreter's default recursion limit

Design Decisions:
    - TAGLESS_ env prefix, optional .env file
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TAGLESS_", env_file=".env", case_sensitive=False,
    )

    # Integer evaluator: signed width for checked arithmetic
    int_bits: int = Field(default=64, ge=8, le=4096)

    # Tree decoder
    max_decode_depth: int = Field(default=500, ge=1, le=900)

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
