"""Shared fixtures for fpkit tests."""

import pytest

from fpkit.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Reset cached settings and strip FPKIT_ variables around each test."""
    for name in ("FPKIT_FAIL_MESSAGE_SEPARATOR", "FPKIT_INCLUDE_TRACEBACK", "FPKIT_TRACE_STAGES"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
