from __future__ import annotations

import pytest

from xdgdir.basedir import MappingEnvironment, ProcessEnvironment


def test_mapping_environment_lookup() -> None:
    env = MappingEnvironment({"HOME": "/home/user"})

    assert env.get("HOME") == "/home/user"
    assert env.get("XDG_CONFIG_HOME") is None


def test_mapping_environment_keyword_values_override_mapping() -> None:
    env = MappingEnvironment({"HOME": "/home/user"}, HOME="/home/other")

    assert env.get("HOME") == "/home/other"


def test_with_values_returns_new_environment() -> None:
    env = MappingEnvironment({"HOME": "/home/user"})

    updated = env.with_values(XDG_CACHE_HOME="/cache")

    assert updated.get("XDG_CACHE_HOME") == "/cache"
    assert env.get("XDG_CACHE_HOME") is None


def test_without_removes_keys() -> None:
    env = MappingEnvironment({"HOME": "/home/user", "XDG_CACHE_HOME": "/cache"})

    assert env.without("HOME").get("HOME") is None
    assert env.without("HOME").get("XDG_CACHE_HOME") == "/cache"


def test_mapping_environment_copies_input() -> None:
    values = {"HOME": "/home/user"}
    env = MappingEnvironment(values)

    values["HOME"] = "/changed"

    assert env.get("HOME") == "/home/user"


def test_process_environment_reads_live_values(monkeypatch: pytest.MonkeyPatch) -> None:
    env = ProcessEnvironment()
    monkeypatch.setenv("XDG_DATA_HOME", "/first")
    assert env.get("XDG_DATA_HOME") == "/first"

    monkeypatch.setenv("XDG_DATA_HOME", "/second")
    assert env.get("XDG_DATA_HOME") == "/second"

    monkeypatch.delenv("XDG_DATA_HOME")
    assert env.get("XDG_DATA_HOME") is None
