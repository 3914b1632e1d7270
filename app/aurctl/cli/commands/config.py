"""Configuration commands.

Shows the effective configuration and writes a default config file.
"""

from typing import Annotated

import typer
from rich.table import Table

from aurctl.cli.types import exit_on_error, get_config
from aurctl.core.config import AurctlConfig, save_config
from aurctl.core.paths import get_config_path
from aurctl.utils.formatting import console, print_success, print_warning

app = typer.Typer(
    help="Show or create the aurctl configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    config = get_config(ctx)

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value", style="muted")

    table.add_row("repo_name", config.repo_name)
    table.add_row("aur_url", config.aur_url)
    table.add_row("rpc_url", config.effective_rpc_url)
    table.add_row("sync_db", str(config.sync_db_path))
    table.add_row("cache_dir", str(config.effective_cache_dir))
    table.add_row("archive", str(config.archive_path))
    table.add_row("build_dir", str(config.effective_build_dir))
    table.add_row("editor", config.effective_editor)
    table.add_row("devel_suffixes", ", ".join(config.devel_suffixes))
    table.add_row("timeout_seconds", f"{config.timeout_seconds:g}")

    console.print(table)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    obj = ctx.find_root().obj or {}
    path = obj.get("config_path") or get_config_path()

    if path.exists() and not force:
        print_warning(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    with exit_on_error():
        saved = save_config(AurctlConfig(), path)

    print_success(f"Config written: {saved}")
