"""Environment lookup capability used by the resolver."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol


class Environment(Protocol):
    """Read-only view of environment variables."""

    def get(self, key: str) -> str | None:
        """Return the raw value of `key`, or None when it is not set."""
        ...


class ProcessEnvironment:
    """Reads the live process environment on every lookup."""

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MappingEnvironment:
    """Environment backed by a plain mapping, used for tests and embedding."""

    def __init__(self, values: Mapping[str, str] | None = None, /, **overrides: str) -> None:
        self._values = dict(values or {}) | overrides

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def with_values(self, **values: str) -> MappingEnvironment:
        return MappingEnvironment(self._values, **values)

    def without(self, *keys: str) -> MappingEnvironment:
        return MappingEnvironment({k: v for k, v in self._values.items() if k not in keys})

    def __repr__(self) -> str:
        return f"MappingEnvironment({self._values!r})"


def default_environment() -> Environment:
    return ProcessEnvironment()
