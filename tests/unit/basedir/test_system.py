from __future__ import annotations

from pathlib import Path

import pytest

from xdgdir.basedir import InvalidAppNameError, MappingEnvironment, resolve_system, scope_system


def test_defaults_when_unset() -> None:
    dirs = resolve_system(MappingEnvironment())

    assert dirs.config_dirs == (Path("/etc/xdg"),)
    assert dirs.data_dirs == (Path("/usr/local/share"), Path("/usr/share"))


def test_entries_keep_preference_order() -> None:
    env = MappingEnvironment(XDG_DATA_DIRS="/opt/share:/usr/share", XDG_CONFIG_DIRS="/etc/custom:/etc/xdg")

    dirs = resolve_system(env)

    assert dirs.data_dirs == (Path("/opt/share"), Path("/usr/share"))
    assert dirs.config_dirs == (Path("/etc/custom"), Path("/etc/xdg"))


def test_relative_and_empty_entries_are_dropped() -> None:
    env = MappingEnvironment(XDG_DATA_DIRS="relative::/usr/share:")

    assert resolve_system(env).data_dirs == (Path("/usr/share"),)


@pytest.mark.parametrize("value", ["", ":", "relative/only"], ids=["empty", "separators", "relative"])
def test_falls_back_when_no_entry_survives(value: str) -> None:
    env = MappingEnvironment(XDG_CONFIG_DIRS=value)

    assert resolve_system(env).config_dirs == (Path("/etc/xdg"),)


def test_does_not_require_home() -> None:
    dirs = resolve_system(MappingEnvironment())

    assert dirs.config_dirs


def test_scope_system_appends_name_to_every_entry() -> None:
    base = resolve_system(MappingEnvironment())

    scoped = scope_system(base, "my-app").unwrap()

    assert scoped.config_dirs == (Path("/etc/xdg/my-app"),)
    assert scoped.data_dirs == (Path("/usr/local/share/my-app"), Path("/usr/share/my-app"))


def test_scope_system_rejects_invalid_name() -> None:
    base = resolve_system(MappingEnvironment())

    assert isinstance(scope_system(base, "").unwrap_err(), InvalidAppNameError)
