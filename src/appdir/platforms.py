"""Platform strategies for base directory lookup.

Unix-like systems follow the XDG Base Directory convention. Windows uses
%APPDATA% for every category. The strategy is picked once and the resolver
never branches on the platform itself.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Protocol

from .environment import Environment
from .models import XdgDir

type PlatformName = Literal["auto", "unix", "windows"]


class PlatformStrategy(Protocol):
    """Protocol for platform specific base directory rules."""

    name: str

    def base_dir(self, env: Environment, xdg: XdgDir) -> Path | None:
        """Base directory for a category, before the app name is appended."""
        ...

    def user_data_dir(self, env: Environment, app_name: str) -> Path | None:
        """Legacy per-user application directory."""
        ...

    def temp_root(self, env: Environment) -> Path:
        """System temporary directory. Never fails."""
        ...


class UnixStrategy:
    name = "unix"

    def base_dir(self, env: Environment, xdg: XdgDir) -> Path | None:
        # Presence decides, so an empty override is still used.
        override = env.get(xdg.env_var)
        if override is not None:
            return Path(override)

        home = env.home()
        if home is None:
            return None
        return home / xdg.fallback

    def user_data_dir(self, env: Environment, app_name: str) -> Path | None:
        home = env.home()
        if home is None:
            return None
        return home / f".{app_name}"

    def temp_root(self, env: Environment) -> Path:
        tmpdir = env.get("TMPDIR")
        if tmpdir is not None:
            return Path(tmpdir)
        return Path("/tmp")


class WindowsStrategy:
    name = "windows"

    def base_dir(self, env: Environment, xdg: XdgDir) -> Path | None:
        # All categories share APPDATA; XDG variables are not consulted.
        return self._appdata(env)

    def user_data_dir(self, env: Environment, app_name: str) -> Path | None:
        appdata = self._appdata(env)
        if appdata is None:
            return None
        return appdata / app_name

    def temp_root(self, env: Environment) -> Path:
        for key in ("TMP", "TEMP", "USERPROFILE"):
            value = env.get(key)
            if value is not None:
                return Path(value)

        system_root = env.get("SystemRoot")
        if system_root is not None:
            return Path(system_root) / "Temp"
        return Path("C:\\Windows\\Temp")

    @staticmethod
    def _appdata(env: Environment) -> Path | None:
        appdata = env.get("APPDATA")
        return Path(appdata) if appdata is not None else None


def detect_platform() -> PlatformStrategy:
    if os.name == "nt":
        return WindowsStrategy()
    return UnixStrategy()


def strategy_for(name: PlatformName) -> PlatformStrategy:
    """Map a configured platform name to its strategy."""
    if name == "auto":
        return detect_platform()
    if name == "windows":
        return WindowsStrategy()
    if name == "unix":
        return UnixStrategy()
    raise ValueError(f"Unknown platform: {name!r}")
