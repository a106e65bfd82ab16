"""Value types for directory resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .resolver import DirectoryResolver


class XdgDir(str, Enum):
    """Base directory category, keyed by the XDG convention it follows."""

    DATA = "data"
    CONFIG = "config"
    CACHE = "cache"

    @property
    def env_var(self) -> str:
        return f"XDG_{self.name}_HOME"

    @property
    def fallback(self) -> Path:
        """Home-relative default used when the override variable is unset."""
        return _FALLBACKS[self]


_FALLBACKS: dict[XdgDir, Path] = {
    XdgDir.DATA: Path(".local") / "share",
    XdgDir.CONFIG: Path(".config"),
    XdgDir.CACHE: Path(".cache"),
}


@dataclass(frozen=True)
class AppDir:
    """Handle for one application's standard directories.

    The name is used as given. Empty or separator-containing names are not
    rejected; they end up in the resolved paths unchanged.

    Attributes:
        app_name: Directory name appended to every base directory
    """

    app_name: str

    def xdg_dir(self, xdg: XdgDir, resolver: DirectoryResolver | None = None) -> Path | None:
        return _resolver_or_default(resolver).xdg_dir(self, xdg)

    def user_data_dir(self, resolver: DirectoryResolver | None = None) -> Path | None:
        return _resolver_or_default(resolver).user_data_dir(self)

    def temp_dir(self, resolver: DirectoryResolver | None = None) -> Path:
        return _resolver_or_default(resolver).temp_dir(self)

    def __str__(self) -> str:
        return self.app_name


def _resolver_or_default(resolver: DirectoryResolver | None) -> DirectoryResolver:
    if resolver is not None:
        return resolver
    from .resolver import get_resolver

    return get_resolver()
