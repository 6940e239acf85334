"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from mochi_mcp.config import DEFAULT_API_BASE, Settings, load_settings
from mochi_mcp.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "MOCHI_API_KEY", "MOCHI_API_BASE", "MOCHI_AUTH_SCHEME", "MOCHI_REVIEWS_ENABLED",
        "MCP_SERVER_NAME", "MCP_SERVER_VERSION", "MCP_SERVER_HOST", "MCP_SERVER_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_key():
    settings = load_settings()

    assert settings.has_key is False
    assert settings.api_base == DEFAULT_API_BASE
    assert settings.auth_scheme == "basic"
    assert settings.reviews_enabled is False
    assert settings.port == 8787


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("MOCHI_API_KEY", "abc")
    monkeypatch.setenv("MOCHI_AUTH_SCHEME", "Bearer")
    monkeypatch.setenv("MOCHI_REVIEWS_ENABLED", "true")
    monkeypatch.setenv("MCP_SERVER_PORT", "9000")

    settings = load_settings()

    assert settings.api_key == "abc"
    assert settings.auth_scheme == "bearer"
    assert settings.reviews_enabled is True
    assert settings.port == 9000


def test_empty_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("MOCHI_API_KEY", "")
    assert load_settings().has_key is False


def test_unknown_auth_scheme_is_rejected(monkeypatch):
    monkeypatch.setenv("MOCHI_AUTH_SCHEME", "digest")

    with pytest.raises(ConfigurationError, match="MOCHI_AUTH_SCHEME"):
        load_settings()


def test_settings_are_immutable():
    settings = load_settings()

    with pytest.raises(PydanticValidationError):
        settings.api_key = "changed"


def test_settings_reject_unknown_auth_scheme():
    with pytest.raises(PydanticValidationError):
        Settings(auth_scheme="digest")
