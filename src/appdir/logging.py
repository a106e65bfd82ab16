"""Logging utilities for appdir using Loguru.

- Library usage: logging disabled by default, can be enabled by library users
- CLI usage: stderr logging, colourised in dev and JSON otherwise
"""

import sys

import loguru
from loguru import logger

from appdir.constants import APP_NAME
from appdir.settings import AppInfo, LogLevel

type Logger = "loguru.Logger"


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )

    return handler_id


def setup_cli_logging(app_info: AppInfo, level: LogLevel) -> int:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    if app_info.environment == "dev":
        handler_id = logger.add(sys.stderr, level=level, format=_get_dev_format, colorize=True)
    else:
        handler_id = logger.add(sys.stderr, level=level, serialize=True, format="{message}", diagnose=False)

    logger.debug("CLI logging initialized", level=level, env=app_info.environment)
    return handler_id


def create_logger(scope: str) -> Logger:
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"


def _get_dev_format(record: "loguru.Record") -> str:
    extra_fields = {k: v for k, v in record["extra"].items() if k not in ["scope", "env"]}
    extra_str = ""
    if extra_fields:
        extra_str = " | " + " ".join(f"{k}={v}" for k, v in extra_fields.items())
        extra_str = extra_str.replace("{", "{{").replace("}", "}}")

    return (
        "<magenta>[{extra[scope]}]</> | "
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}:{function}:{line}</cyan> - "
        "<level>{message}</level>"
        f"{extra_str}\n{{exception}}"
    )
