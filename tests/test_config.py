"""Configuration Tests."""

import pytest
from pydantic import ValidationError

from relay_config.settings import Settings


def test_settings_load_defaults(monkeypatch):
    """Test settings load with defaults."""
    monkeypatch.delenv("CHAIN_VALUE_PAD_WIDTH", raising=False)
    monkeypatch.delenv("LOCAL_TOOL_TIMEOUT_SECONDS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.CHAIN_VALUE_PAD_WIDTH == 0
    assert settings.LOCAL_TOOL_TIMEOUT_SECONDS is None


def test_settings_read_environment(monkeypatch):
    """Test environment variables override defaults."""
    monkeypatch.setenv("CHAIN_VALUE_PAD_WIDTH", "256")
    monkeypatch.setenv("LOG_FORMAT", "text")

    settings = Settings(_env_file=None)

    assert settings.CHAIN_VALUE_PAD_WIDTH == 256
    assert settings.LOG_FORMAT == "text"


def test_settings_reject_negative_pad_width():
    """Test pad width must not be negative."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, CHAIN_VALUE_PAD_WIDTH=-1)
