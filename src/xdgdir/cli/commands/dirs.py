from __future__ import annotations

import json
from enum import Enum
from typing import Annotated

import typer
import yaml
from result import Result, is_err

from xdgdir.basedir import (
    BaseDirectorySet,
    DirectoryKind,
    XdgError,
    resolve_for,
    resolve_global,
    resolve_system,
    scope_system,
)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format."),
]

AppNameArgument = Annotated[
    str | None,
    typer.Argument(help="Application name appended to the per-application directories.", show_default=False),
]
RequireRuntimeOption = Annotated[
    bool,
    typer.Option("--require-runtime", help="Fail when $XDG_RUNTIME_DIR is not usable."),
]


def show(
    app_name: AppNameArgument = None,
    format: FormatOption = OutputFormat.TEXT,
    require_runtime: RequireRuntimeOption = False,
) -> None:
    """Print every resolved base directory."""
    result = _resolve(app_name, require_runtime=require_runtime)
    if is_err(result):
        _handle_error(result.err())
        raise typer.Exit(code=1)

    typer.echo(_format_payload(result.unwrap().as_dict(), format))


def get(
    kind: Annotated[DirectoryKind, typer.Argument(help="Directory to print.", case_sensitive=False)],
    app_name: AppNameArgument = None,
) -> None:
    """Print a single resolved directory."""
    result = _resolve(app_name, require_runtime=kind is DirectoryKind.RUNTIME)
    if is_err(result):
        _handle_error(result.err())
        raise typer.Exit(code=1)

    typer.echo(str(result.unwrap().get(kind)))


def system(
    app_name: AppNameArgument = None,
    format: FormatOption = OutputFormat.TEXT,
) -> None:
    """Print the system search directories ($XDG_CONFIG_DIRS, $XDG_DATA_DIRS)."""
    dirs = resolve_system()
    if app_name is not None:
        scoped = scope_system(dirs, app_name)
        if is_err(scoped):
            _handle_error(scoped.err())
            raise typer.Exit(code=1)
        dirs = scoped.unwrap()

    payload = dirs.as_dict()
    if format is OutputFormat.TEXT:
        typer.echo("\n".join(f"{key}={':'.join(paths)}" for key, paths in payload.items()))
        return
    typer.echo(_format_payload(payload, format))


def _resolve(app_name: str | None, *, require_runtime: bool) -> Result[BaseDirectorySet, XdgError]:
    if app_name is None:
        return resolve_global(require_runtime=require_runtime)
    return resolve_for(app_name, require_runtime=require_runtime)


def _format_payload(payload: dict[str, object], format: OutputFormat) -> str:
    if format is OutputFormat.JSON:
        return json.dumps(payload, indent=2)
    if format is OutputFormat.YAML:
        return yaml.safe_dump(payload, sort_keys=False)
    return "\n".join(f"{key}={value}" for key, value in payload.items())


def _handle_error(error: XdgError) -> None:
    typer.secho(f"Error: {error.message}", err=True, fg=typer.colors.RED)
