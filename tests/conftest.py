from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from appdir.resolver import reset_resolver
from appdir.settings import reset_settings


@pytest.fixture(autouse=True)
def _isolate_appdir_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in list(os.environ.keys()):
        if key.startswith("APPDIR_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    reset_resolver()
    yield
    reset_settings()
    reset_resolver()
