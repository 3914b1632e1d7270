"""Clean command implementation.

Removes mirrors and package files that no package of the local repository
refers to any more, and clears build leftovers from the remaining mirrors.
"""

from typing import Annotated

import typer
from rich.markup import escape

from aurctl.cli.types import exit_on_error, get_config, get_installed_registry
from aurctl.core.sweep import CacheSweeper
from aurctl.tools.git import Git
from aurctl.utils.formatting import console, print_success


def clean(
    ctx: typer.Context,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be removed, change nothing.",
        ),
    ] = False,
) -> None:
    """Sweep the package cache."""
    config = get_config(ctx)

    with exit_on_error():
        sweeper = CacheSweeper(
            config.effective_cache_dir,
            config.repo_name,
            get_installed_registry(config),
            Git(),
            dry_run=dry_run,
        )
        result = sweeper.sweep()

    verb = "Would remove" if dry_run else "Removed"
    for name in result.removed:
        console.print(f"  [muted]{verb.lower()}[/muted] {escape(name)}")

    count = len(result.removed)
    print_success(f"{verb} {count} cache entr{'y' if count == 1 else 'ies'}.")
