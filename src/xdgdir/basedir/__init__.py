"""XDG base directory resolution."""

from .environment import Environment, MappingEnvironment, ProcessEnvironment
from .models import (
    BaseDirectorySet,
    DirectoryKind,
    InvalidAppNameError,
    InvalidHomeError,
    MissingHomeError,
    MissingRuntimeDirError,
    SystemDirectorySet,
    XdgError,
)
from .resolver import resolve_for, resolve_global, resolve_system, scope, scope_system
from .variables import XDG_VARIABLES, XdgVariable

__all__ = [
    "XDG_VARIABLES",
    "BaseDirectorySet",
    "DirectoryKind",
    "Environment",
    "InvalidAppNameError",
    "InvalidHomeError",
    "MappingEnvironment",
    "MissingHomeError",
    "MissingRuntimeDirError",
    "ProcessEnvironment",
    "SystemDirectorySet",
    "XdgError",
    "XdgVariable",
    "resolve_for",
    "resolve_global",
    "resolve_system",
    "scope",
    "scope_system",
]
