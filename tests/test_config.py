"""Configuration — defaults, env overrides and validation."""

import pytest
from pydantic import ValidationError

from tagless.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.int_bits == 64
    assert settings.max_decode_depth == 500
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TAGLESS_INT_BITS", "32")
    monkeypatch.setenv("TAGLESS_LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.int_bits == 32
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("field, value", [
    ("int_bits", 4),
    ("max_decode_depth", 0),
    ("max_decode_depth", 5000),
    ("log_level", "LOUD"),
    ("log_format", "xml"),
])
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
