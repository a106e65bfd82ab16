"""Read-only access to process environment state."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Protocol


class Environment(Protocol):
    """Protocol for reading environment variables and the user's home."""

    def get(self, key: str) -> str | None:
        """Return the variable's value, or None when it is unset."""
        ...

    def home(self) -> Path | None:
        """Return the current user's home directory, or None when unknown."""
        ...


class OsEnvironment:
    """Live view of the running process. Every call re-reads the OS."""

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def home(self) -> Path | None:
        try:
            return Path.home()
        except (RuntimeError, KeyError):
            return None


class MappingEnvironment:
    """Fixed environment backed by a mapping, for tests and embedding."""

    def __init__(self, variables: Mapping[str, str] | None = None, home: Path | str | None = None) -> None:
        self._variables = MappingProxyType(dict(variables or {}))
        self._home = Path(home) if home is not None else None

    def get(self, key: str) -> str | None:
        return self._variables.get(key)

    def home(self) -> Path | None:
        return self._home

    def __repr__(self) -> str:
        return f"MappingEnvironment(variables={dict(self._variables)!r}, home={self._home!r})"
