"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the copier.

Usage:
    from structcopy.config import CopierSettings

    # Load from environment variables (STRUCTCOPY_*)
    settings = CopierSettings()

    # Or override with explicit values
    settings = CopierSettings(strict=True, diagnostics="collect")
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CopierSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a Copier.

    Attributes:
        strict: Default null policy when a call does not pass `strict`.
            False skips None source values, True writes them through.
        serialize_calls: Hold a process-wide lock around every public copy.
        naming: Introspection back end, "fields" or "accessors".
        diagnostics: Default sink, "log", "collect" or "raise".
        log_level: Level used by the logging sink.

    Environment Variables:
        STRUCTCOPY_STRICT
        STRUCTCOPY_SERIALIZE_CALLS
        STRUCTCOPY_NAMING
        STRUCTCOPY_DIAGNOSTICS
        STRUCTCOPY_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict: bool = False
    serialize_calls: bool = False
    naming: Literal["fields", "accessors"] = "fields"
    diagnostics: Literal["log", "collect", "raise"] = "log"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
