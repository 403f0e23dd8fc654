"""XDG base directory resolution.

Resolution is a pure function of the environment: nothing here touches the
filesystem. Each call reads the environment afresh and returns either a
complete directory set or the error describing the first failed precondition.
"""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result, is_err

from xdgdir.common.logging import create_logger

from .environment import Environment, default_environment
from .models import (
    BaseDirectorySet,
    DirectoryKind,
    InvalidAppNameError,
    InvalidHomeError,
    MissingHomeError,
    MissingRuntimeDirError,
    SystemDirectorySet,
    XdgError,
    is_absolute,
)
from .variables import HOME_VARIABLE, XDG_CONFIG_DIRS, XDG_DATA_DIRS, XDG_VARIABLES, XdgSearchVariable

logger = create_logger("resolver")


def resolve_global(
    env: Environment | None = None,
    *,
    require_runtime: bool = False,
) -> Result[BaseDirectorySet, XdgError]:
    """Resolve the global, non-application-specific base directories.

    Args:
        env: Environment to read; defaults to the process environment
        require_runtime: Fail with MissingRuntimeDirError instead of leaving
            `runtime` unset when XDG_RUNTIME_DIR is unusable

    Returns:
        Ok(BaseDirectorySet) with every directory resolved.
        Err(MissingHomeError | InvalidHomeError) when $HOME cannot anchor the defaults.
        Err(MissingRuntimeDirError) when the runtime directory is required but unavailable.
    """
    if env is None:
        env = default_environment()

    home_result = _resolve_home(env)
    if is_err(home_result):
        logger.debug("Base directory resolution failed", error=home_result.err_value.message)
        return Err(home_result.err_value)
    home = home_result.ok_value

    resolved: dict[str, Path | None] = {}
    for variable in XDG_VARIABLES:
        path = _read_override(env, variable.name)
        if path is None:
            path = variable.default(home)
            source = "default" if path is not None else "unset"
        else:
            source = variable.name
        logger.debug("Resolved base directory", kind=variable.kind.value, path=str(path), source=source)
        resolved[variable.kind.value] = path

    if require_runtime and resolved[DirectoryKind.RUNTIME.value] is None:
        return Err(MissingRuntimeDirError())

    return Ok(BaseDirectorySet(home=home, **resolved))


def resolve_for(
    app_name: str,
    env: Environment | None = None,
    *,
    require_runtime: bool = False,
) -> Result[BaseDirectorySet, XdgError]:
    """Resolve base directories for `app_name`.

    The application name is validated before the environment is read, so an
    invalid name is reported even when $HOME is missing.
    """
    name_error = _validate_app_name(app_name)
    if name_error is not None:
        return Err(name_error)
    return resolve_global(env, require_runtime=require_runtime).and_then(lambda dirs: scope(dirs, app_name))


def scope(base: BaseDirectorySet, app_name: str) -> Result[BaseDirectorySet, InvalidAppNameError]:
    """Append `app_name` to the per-application directories of `base`.

    `home`, `bin` and `runtime` are shared between applications and stay as they are.
    """
    name_error = _validate_app_name(app_name)
    if name_error is not None:
        return Err(name_error)

    updates = {kind.value: base.get(kind) / app_name for kind in DirectoryKind if kind.scoped}
    return Ok(base.model_copy(update=updates))


def resolve_system(env: Environment | None = None) -> SystemDirectorySet:
    """Resolve the preference-ordered system search directories.

    Never fails: relative or empty entries are dropped and the XDG defaults
    are used when no usable entry remains.
    """
    if env is None:
        env = default_environment()
    return SystemDirectorySet(
        config_dirs=_read_search_path(env, XDG_CONFIG_DIRS),
        data_dirs=_read_search_path(env, XDG_DATA_DIRS),
    )


def scope_system(base: SystemDirectorySet, app_name: str) -> Result[SystemDirectorySet, InvalidAppNameError]:
    name_error = _validate_app_name(app_name)
    if name_error is not None:
        return Err(name_error)
    return Ok(
        SystemDirectorySet(
            config_dirs=tuple(path / app_name for path in base.config_dirs),
            data_dirs=tuple(path / app_name for path in base.data_dirs),
        )
    )


def _resolve_home(env: Environment) -> Result[Path, XdgError]:
    value = env.get(HOME_VARIABLE)
    if not value:
        return Err(MissingHomeError())
    if not is_absolute(value):
        return Err(InvalidHomeError(value=value, message=f'{HOME_VARIABLE}="{value}" is not an absolute path'))
    return Ok(Path(value))


def _read_override(env: Environment, name: str) -> Path | None:
    value = env.get(name)
    if not value:
        return None
    if not is_absolute(value):
        logger.warning("Ignoring relative path in environment", variable=name, value=value)
        return None
    return Path(value)


def _read_search_path(env: Environment, variable: XdgSearchVariable) -> tuple[Path, ...]:
    raw = env.get(variable.name) or ""
    entries = []
    for entry in raw.split(":"):
        if not entry:
            continue
        if not is_absolute(entry):
            logger.warning("Ignoring relative search path entry", variable=variable.name, value=entry)
            continue
        entries.append(Path(entry))

    if not entries:
        return tuple(Path(entry) for entry in variable.defaults)
    return tuple(entries)


def _validate_app_name(app_name: str) -> InvalidAppNameError | None:
    if not app_name:
        return InvalidAppNameError(app_name=app_name, message="Application name must not be empty")
    if "/" in app_name or "\0" in app_name:
        return InvalidAppNameError(
            app_name=app_name,
            message=f"Application name '{app_name}' must be a single path component",
        )
    if app_name in (".", ".."):
        return InvalidAppNameError(
            app_name=app_name,
            message=f"Application name '{app_name}' does not name a directory",
        )
    return None
