"""Foundation layer: configuration shared by the error and monad modules."""

from .config import FpkitSettings, clear_settings_cache, get_settings

__all__ = ["FpkitSettings", "clear_settings_cache", "get_settings"]
