"""Configuration management using pydantic-settings."""

from .settings import FpkitSettings, clear_settings_cache, get_settings

__all__ = [
    "FpkitSettings",
    "clear_settings_cache",
    "get_settings",
]
