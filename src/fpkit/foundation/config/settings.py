"""Environment-based configuration using pydantic-settings.

Example:
    >>> from fpkit.foundation.config import get_settings
    >>> get_settings().include_traceback
    True

    # Or with environment variables:
    # FPKIT_FAIL_MESSAGE_SEPARATOR="; "
    # FPKIT_TRACE_STAGES=true
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FpkitSettings(BaseSettings):
    """Root settings for fpkit, loaded from FPKIT_ environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FPKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    fail_message_separator: str = Field(
        default=os.linesep,
        description="Separator used when joining error messages into a fail message",
    )
    include_traceback: bool = Field(
        default=True,
        description="Include the formatted traceback in errors built from exceptions",
    )
    trace_stages: bool = Field(default=False, description="Log every composed stage invocation at DEBUG")


@lru_cache(maxsize=1)
def get_settings() -> FpkitSettings:
    """Get the global settings instance (cached)."""
    return FpkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
