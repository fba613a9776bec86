"""Recipebook CLI entry point."""

from typing import Annotated, Optional

import typer

from . import __version__
from .console import RecipeConsole
from .logger import get_logger
from .runtime import bootstrap_runtime_context

logger = get_logger("cli")

APP_NAME = "recipebook"

app = typer.Typer(
    help=f"{APP_NAME} - record and display recipes in the terminal",
    epilog="Run without a command to open the interactive menu.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    profile: Annotated[Optional[str], typer.Option("--profile", help="Profile to log under")] = None,
):
    """Open the interactive recipe console unless a command is given."""
    runtime = bootstrap_runtime_context(profile)
    logger.debug(f"Using {runtime.profile}")

    if ctx.invoked_subcommand is not None:
        return

    try:
        console = RecipeConsole(catalog=runtime.catalog)
        exit_code = console.run()
    except Exception as e:
        logger.exception(f"Console failed: {e}")
        typer.echo(f"Error launching console: {e}", err=True)
        raise typer.Exit(1)
    raise typer.Exit(exit_code)


@app.command()
def version():
    """Show version."""
    typer.echo(f"{APP_NAME} {__version__}")


def main():
    """Entry point for the recipebook CLI."""
    app()


if __name__ == "__main__":
    main()
