"""Resolved directory sets and resolution error models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, field_validator
from result import Err, Ok, Result


class DirectoryKind(str, Enum):
    """Logical XDG base directories."""

    CONFIG = "config"
    DATA = "data"
    STATE = "state"
    CACHE = "cache"
    BIN = "bin"
    RUNTIME = "runtime"

    @property
    def scoped(self) -> bool:
        """Whether the application name is appended to this directory."""
        return self not in (DirectoryKind.BIN, DirectoryKind.RUNTIME)


def is_absolute(value: str | Path) -> bool:
    return PurePosixPath(value).is_absolute()


class XdgError(BaseModel):
    """Base error for directory resolution."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    message: str

    def __str__(self) -> str:
        return self.message


class MissingHomeError(XdgError):
    """$HOME is unset or empty."""

    variable: str = "HOME"
    message: str = "$HOME is not set or empty"


class InvalidHomeError(XdgError):
    """$HOME holds a relative path."""

    variable: str = "HOME"
    value: str


class MissingRuntimeDirError(XdgError):
    """The runtime directory was required but XDG_RUNTIME_DIR is unusable."""

    variable: str = "XDG_RUNTIME_DIR"
    message: str = "$XDG_RUNTIME_DIR is not set or is not an absolute path"


class InvalidAppNameError(XdgError):
    """Application name is not a single path component."""

    app_name: str


class BaseDirectorySet(BaseModel):
    """User base directories, either global or scoped to one application.

    Every path is absolute. `runtime` is None when XDG_RUNTIME_DIR is not
    usable, since the XDG spec gives it no default.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    home: Path
    config: Path
    data: Path
    state: Path
    cache: Path
    bin: Path
    runtime: Path | None = None

    @field_validator("home", "config", "data", "state", "cache", "bin", "runtime")
    @classmethod
    def _validate_absolute(cls, value: Path | None) -> Path | None:
        if value is not None and not is_absolute(value):
            raise ValueError(f"'{value}' is not an absolute path")
        return value

    def get(self, kind: DirectoryKind) -> Path | None:
        return getattr(self, kind.value)

    def require_runtime(self) -> Result[Path, MissingRuntimeDirError]:
        if self.runtime is None:
            return Err(MissingRuntimeDirError())
        return Ok(self.runtime)

    def as_dict(self) -> dict[str, str]:
        """String form of every resolved path, `runtime` omitted when unset."""
        payload = {"home": str(self.home)}
        for kind in DirectoryKind:
            path = self.get(kind)
            if path is not None:
                payload[kind.value] = str(path)
        return payload


class SystemDirectorySet(BaseModel):
    """Preference-ordered system search directories ($XDG_CONFIG_DIRS, $XDG_DATA_DIRS)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    config_dirs: tuple[Path, ...]
    data_dirs: tuple[Path, ...]

    @field_validator("config_dirs", "data_dirs")
    @classmethod
    def _validate_entries(cls, value: tuple[Path, ...]) -> tuple[Path, ...]:
        if not value:
            raise ValueError("at least one search directory is required")
        for path in value:
            if not is_absolute(path):
                raise ValueError(f"'{path}' is not an absolute path")
        return value

    def as_dict(self) -> dict[str, list[str]]:
        return {
            "config_dirs": [str(path) for path in self.config_dirs],
            "data_dirs": [str(path) for path in self.data_dirs],
        }
