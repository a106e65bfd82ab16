"""Directory resolution for application handles."""

from __future__ import annotations

from pathlib import Path

from .environment import Environment, OsEnvironment
from .logging import create_logger
from .models import AppDir, XdgDir
from .platforms import PlatformStrategy, strategy_for
from .settings import get_settings

logger = create_logger("resolver")


class DirectoryResolver:
    """Resolve standard directories from an environment and a platform strategy.

    Nothing is cached: each call reads the environment again, so a variable
    changed between two calls is reflected in the second result.
    """

    def __init__(self, environment: Environment, strategy: PlatformStrategy) -> None:
        self._environment = environment
        self._strategy = strategy

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def strategy(self) -> PlatformStrategy:
        return self._strategy

    def xdg_dir(self, app: AppDir, xdg: XdgDir) -> Path | None:
        """Resolve a data, config or cache directory for the application.

        Returns:
            Base directory joined with the app name, or None when no base
            directory is available on this platform.
        """
        base = self._strategy.base_dir(self._environment, xdg)
        if base is None:
            logger.trace("No base directory", app=app.app_name, kind=xdg.value, platform=self._strategy.name)
            return None
        logger.trace("Resolved base directory", app=app.app_name, kind=xdg.value, base=str(base))
        return base / app.app_name

    def user_data_dir(self, app: AppDir) -> Path | None:
        """Resolve the legacy per-user directory (~/.name or %APPDATA%/name)."""
        path = self._strategy.user_data_dir(self._environment, app.app_name)
        if path is None:
            logger.trace("No user data directory", app=app.app_name, platform=self._strategy.name)
        return path

    def temp_dir(self, app: AppDir) -> Path:
        return self._strategy.temp_root(self._environment) / app.app_name


def get_resolver() -> DirectoryResolver:
    """Return the process-wide resolver, creating it on first use."""
    global _resolver
    if _resolver is None:
        strategy = strategy_for(get_settings().platform)
        _resolver = DirectoryResolver(OsEnvironment(), strategy)
        logger.debug("Default resolver created", platform=strategy.name)
    return _resolver


def reset_resolver() -> None:
    global _resolver
    _resolver = None


def xdg_dir(app: AppDir, xdg: XdgDir) -> Path | None:
    return get_resolver().xdg_dir(app, xdg)


def user_data_dir(app: AppDir) -> Path | None:
    return get_resolver().user_data_dir(app)


def temp_dir(app: AppDir) -> Path:
    return get_resolver().temp_dir(app)


# Private singleton instance
_resolver: DirectoryResolver | None = None
