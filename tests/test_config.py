"""Application Configuration - defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from service_template.config import Settings, get_settings


def test_defaults(monkeypatch):
    for var in ("PORT", "HOST", "APP_VERSION", "LOG_LEVEL", "LOG_FORMAT", "DOCS_URL"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.app_version == "1.0.0"
    assert settings.docs_url == "/swagger"
    assert settings.openapi_url == "/swagger/doc.json"
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("APP_VERSION", "2.0.0")
    monkeypatch.setenv("log_level", "debug")
    settings = Settings(_env_file=None)
    assert settings.port == 9090
    assert settings.app_version == "2.0.0"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("port", ["0", "70000"])
def test_rejects_invalid_port(monkeypatch, port):
    monkeypatch.setenv("PORT", port)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="verbose")


def test_rejects_unknown_log_format():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
