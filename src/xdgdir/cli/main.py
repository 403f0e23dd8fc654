from __future__ import annotations

import os
from typing import Annotated

import typer

from xdgdir.common import create_logger, setup_cli_logging
from xdgdir.settings import get_settings

from .commands import dirs as dirs_commands

logger = create_logger("cli")

app = typer.Typer(help="Resolve XDG base directories.")
app.command("show")(dirs_commands.show)
app.command("get")(dirs_commands.get)
app.command("system")(dirs_commands.system)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log resolution details to stderr")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    _setup_logging(verbose=verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging(*, verbose: bool) -> None:
    settings = get_settings()
    logging_config = settings.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"enabled": True, "log_level": "DEBUG"})

    setup_cli_logging(app_info=settings.app, config=logging_config)
    logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the xdgdir CLI."""
    app()
