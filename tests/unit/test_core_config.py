"""Tests for core configuration module."""

import os

from strillone.core.config import Settings, get_settings


def test_settings_defaults() -> None:
    """Test that settings have correct default values."""
    env_vars = ["PORT", "APP_NAME", "DEDUP_TTL", "SLACK_WEBHOOK_URL"]
    old_values = {}
    for var in env_vars:
        old_values[var] = os.environ.pop(var, None)

    try:
        settings = Settings(_env_file=None)  # type: ignore

        assert settings.app_name == "dnsimple-strillone"
        assert settings.port == 5000
        assert settings.dedup_ttl == 300
        assert settings.slack_webhook_url == "https://hooks.slack.com/services"
    finally:
        for var, value in old_values.items():
            if value is not None:
                os.environ[var] = value


def test_port_from_environment(monkeypatch) -> None:
    """Test PORT environment variable selects the port."""
    monkeypatch.setenv("PORT", "8080")
    settings = Settings(_env_file=None)  # type: ignore
    assert settings.port == 8080


def test_get_settings_cached() -> None:
    """Test that get_settings returns cached instance."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
