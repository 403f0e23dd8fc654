from __future__ import annotations

from pathlib import Path

import pytest

from xdgdir.basedir import XDG_VARIABLES, DirectoryKind
from xdgdir.basedir.variables import variable_for


def test_every_kind_has_one_variable() -> None:
    assert [variable.kind for variable in XDG_VARIABLES] == list(DirectoryKind)


def test_only_runtime_lacks_a_default() -> None:
    without_default = [variable.kind for variable in XDG_VARIABLES if not variable.has_default]

    assert without_default == [DirectoryKind.RUNTIME]
    assert variable_for(DirectoryKind.RUNTIME).default(Path("/home/user")) is None


@pytest.mark.parametrize(
    ("kind", "name", "expected"),
    [
        (DirectoryKind.CONFIG, "XDG_CONFIG_HOME", "/home/user/.config"),
        (DirectoryKind.DATA, "XDG_DATA_HOME", "/home/user/.local/share"),
        (DirectoryKind.STATE, "XDG_STATE_HOME", "/home/user/.local/state"),
        (DirectoryKind.CACHE, "XDG_CACHE_HOME", "/home/user/.cache"),
        (DirectoryKind.BIN, "XDG_BIN_HOME", "/home/user/.local/bin"),
    ],
)
def test_defaults_under_home(kind: DirectoryKind, name: str, expected: str) -> None:
    variable = variable_for(kind)

    assert variable.name == name
    assert variable.default(Path("/home/user")) == Path(expected)
