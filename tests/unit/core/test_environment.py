from __future__ import annotations

from pathlib import Path

import pytest

from appdir import MappingEnvironment, OsEnvironment


def test_os_environment_reads_variables_live(monkeypatch: pytest.MonkeyPatch) -> None:
    env = OsEnvironment()
    monkeypatch.delenv("APPDIR_TEST_VALUE", raising=False)

    assert env.get("APPDIR_TEST_VALUE") is None

    monkeypatch.setenv("APPDIR_TEST_VALUE", "first")
    assert env.get("APPDIR_TEST_VALUE") == "first"

    monkeypatch.setenv("APPDIR_TEST_VALUE", "second")
    assert env.get("APPDIR_TEST_VALUE") == "second"


def test_os_environment_keeps_empty_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APPDIR_TEST_VALUE", "")

    assert OsEnvironment().get("APPDIR_TEST_VALUE") == ""


def test_os_environment_home_uses_platform_lookup(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert OsEnvironment().home() == tmp_path


@pytest.mark.parametrize("error", [RuntimeError("no home"), KeyError("getpwuid(): uid not found")])
def test_os_environment_home_returns_none_when_undeterminable(
    monkeypatch: pytest.MonkeyPatch, error: Exception
) -> None:
    def fake_home(cls: type[Path]) -> Path:
        raise error

    monkeypatch.setattr(Path, "home", classmethod(fake_home))

    assert OsEnvironment().home() is None


def test_mapping_environment_returns_given_values() -> None:
    env = MappingEnvironment({"APPDATA": "C:\\Users\\alice\\AppData\\Roaming"}, home="/home/alice")

    assert env.get("APPDATA") == "C:\\Users\\alice\\AppData\\Roaming"
    assert env.get("XDG_DATA_HOME") is None
    assert env.home() == Path("/home/alice")


def test_mapping_environment_is_detached_from_source() -> None:
    variables = {"XDG_CACHE_HOME": "/cache"}
    env = MappingEnvironment(variables)

    variables["XDG_CACHE_HOME"] = "/changed"

    assert env.get("XDG_CACHE_HOME") == "/cache"
    assert env.home() is None
