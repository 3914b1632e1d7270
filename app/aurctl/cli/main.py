"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from aurctl import __version__
from aurctl.cli.commands import clean, config, remove, search, sync, update
from aurctl.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="aurctl",
    help="Build AUR packages into a local pacman repository.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"aurctl version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file (default: ~/.config/aurctl/config.toml).",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """aurctl - build AUR packages into a local pacman repository.

    Packages are reconciled against the AUR, built with makepkg from git
    mirrors kept in the cache, and published with repo-add.
    """
    configure_logging(verbose)
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


# Register commands
app.command("search")(search.search)
app.command("sync")(sync.sync)
app.command("update")(update.update)
app.command("remove")(remove.remove)
app.command("clean")(clean.clean)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
