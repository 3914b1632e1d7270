"""Remove command implementation."""

from typing import Annotated

import typer

from aurctl.cli.types import exit_on_error, get_config
from aurctl.tools.repo import RepoArchive


def remove(
    ctx: typer.Context,
    names: Annotated[
        list[str],
        typer.Argument(help="Packages to remove from the local repository.", show_default=False),
    ],
) -> None:
    """Remove packages from the local repository archive.

    Installed copies are left alone; uninstall them with pacman.
    """
    config = get_config(ctx)

    with exit_on_error():
        RepoArchive(config.archive_path).remove(names)
