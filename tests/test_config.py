"""
Settings tests
"""
import pytest
from pydantic import ValidationError

from ai_pm.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("GROQ_API_KEY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 5000
    assert settings.groq_api_key == ""
    assert settings.api_key_configured is False
    assert settings.upstream_timeout is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GROQ_API_KEY", "gsk_123")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.api_key_configured is True


def test_settings_are_immutable():
    settings = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.port = 1234


def test_origins_list():
    assert Settings(allowed_origins="*", _env_file=None).origins == ["*"]
    assert Settings(allowed_origins="http://a.com, http://b.com", _env_file=None).origins == [
        "http://a.com", "http://b.com"
    ]
