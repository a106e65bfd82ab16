from __future__ import annotations

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from appdir.constants import APP_NAME, ENV_PREFIX
from appdir.platforms import PlatformName

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    platform: PlatformName = "auto"
    log_level: LogLevel = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "AppInfo",
    "LogLevel",
    "Settings",
    "get_settings",
    "reset_settings",
]
