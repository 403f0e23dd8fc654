"""Declarative table of XDG environment variables and their defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .models import DirectoryKind


@dataclass(frozen=True, slots=True)
class XdgVariable:
    """One user base directory: the variable overriding it and its default under $HOME.

    Attributes:
        kind: Directory this variable resolves
        name: Override environment variable
        home_suffix: Path segments joined onto $HOME for the default, or None
            when the XDG spec defines no default
    """

    kind: DirectoryKind
    name: str
    home_suffix: tuple[str, ...] | None

    @property
    def has_default(self) -> bool:
        return self.home_suffix is not None

    def default(self, home: Path) -> Path | None:
        if self.home_suffix is None:
            return None
        return home.joinpath(*self.home_suffix)


@dataclass(frozen=True, slots=True)
class XdgSearchVariable:
    """Colon-separated system search path with its fallback entries."""

    name: str
    defaults: tuple[str, ...]


HOME_VARIABLE = "HOME"

XDG_VARIABLES: tuple[XdgVariable, ...] = (
    XdgVariable(DirectoryKind.CONFIG, "XDG_CONFIG_HOME", (".config",)),
    XdgVariable(DirectoryKind.DATA, "XDG_DATA_HOME", (".local", "share")),
    XdgVariable(DirectoryKind.STATE, "XDG_STATE_HOME", (".local", "state")),
    XdgVariable(DirectoryKind.CACHE, "XDG_CACHE_HOME", (".cache",)),
    XdgVariable(DirectoryKind.BIN, "XDG_BIN_HOME", (".local", "bin")),
    XdgVariable(DirectoryKind.RUNTIME, "XDG_RUNTIME_DIR", None),
)

XDG_CONFIG_DIRS = XdgSearchVariable("XDG_CONFIG_DIRS", ("/etc/xdg",))
XDG_DATA_DIRS = XdgSearchVariable("XDG_DATA_DIRS", ("/usr/local/share", "/usr/share"))


def variable_for(kind: DirectoryKind) -> XdgVariable:
    for variable in XDG_VARIABLES:
        if variable.kind is kind:
            return variable
    raise KeyError(kind)
