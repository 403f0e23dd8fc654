"""xdgdir - XDG Base Directory resolution without filesystem access.

By default, xdgdir's internal logging is disabled when used as a library.
Library users can enable logging by calling xdgdir.enable_logging().
"""

from xdgdir.basedir import (
    BaseDirectorySet,
    DirectoryKind,
    Environment,
    InvalidAppNameError,
    InvalidHomeError,
    MappingEnvironment,
    MissingHomeError,
    MissingRuntimeDirError,
    ProcessEnvironment,
    SystemDirectorySet,
    XdgError,
    resolve_for,
    resolve_global,
    resolve_system,
    scope,
    scope_system,
)
from xdgdir.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
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
    "enable_logging",
    "resolve_for",
    "resolve_global",
    "resolve_system",
    "scope",
    "scope_system",
]
