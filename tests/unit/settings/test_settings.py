from __future__ import annotations

import pytest
from pydantic import ValidationError

from appdir.settings import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()

    assert settings.platform == "auto"
    assert settings.log_level == "WARNING"
    assert settings.app.project_name == "appdir"
    assert settings.app.environment == "dev"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APPDIR_PLATFORM", "windows")
    monkeypatch.setenv("APPDIR_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("APPDIR_APP__ENVIRONMENT", "prod")

    settings = Settings()

    assert settings.platform == "windows"
    assert settings.log_level == "DEBUG"
    assert settings.app.environment == "prod"
    assert settings.app.project_name == "appdir"


def test_env_is_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("appdir_platform", "unix")

    assert Settings().platform == "unix"


def test_invalid_platform_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APPDIR_PLATFORM", "beos")

    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_returns_singleton() -> None:
    assert get_settings() is get_settings()
