"""Shared option types and service factories for CLI commands.

This module provides the flags shared by sync and update, and builds the
collaborators (registry client, installed registry, external tools) from
the loaded configuration so each command module stays small.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated

import typer

from aurctl.core.config import AurctlConfig, RunOptions, load_config
from aurctl.core.errors import AurctlError
from aurctl.core.orchestrator import Orchestrator
from aurctl.core.prompt import get_decisions
from aurctl.core.reconcile import Reconciler
from aurctl.database.base import InstalledRegistry
from aurctl.database.syncdb import SyncDatabase
from aurctl.registry.client import RegistryClient
from aurctl.tools.editor import Editor
from aurctl.tools.git import Git
from aurctl.tools.makepkg import Makepkg
from aurctl.tools.repo import RepoArchive
from aurctl.utils.formatting import print_error

DevelOption = Annotated[
    bool,
    typer.Option("--devel", help="Check development packages against their sources."),
]
ForceOption = Annotated[
    bool,
    typer.Option("--force", help="Rebuild packages even when they are up to date."),
]
NoEditOption = Annotated[
    bool,
    typer.Option("--noedit", help="Don't offer to edit PKGBUILDs."),
]
NoConfirmOption = Annotated[
    bool,
    typer.Option("--noconfirm", help="Answer yes to every question."),
]


def get_config(ctx: typer.Context) -> AurctlConfig:
    """Load the configuration selected by the global --config option.

    Raises:
        typer.Exit: If the configuration is invalid.
    """
    obj = ctx.find_root().obj or {}
    try:
        return load_config(obj.get("config_path"))
    except AurctlError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def get_registry_client(config: AurctlConfig) -> RegistryClient:
    """Create a registry client for the configured RPC endpoint."""
    return RegistryClient(config.effective_rpc_url, timeout=config.timeout_seconds)


def get_installed_registry(config: AurctlConfig) -> InstalledRegistry:
    """Create the installed-package registry for the local repository."""
    return SyncDatabase(config.sync_db_path)


def get_makepkg(config: AurctlConfig, options: RunOptions) -> Makepkg:
    """Create the makepkg wrapper writing into the cache."""
    return Makepkg(
        config.effective_cache_dir,
        config.effective_build_dir,
        noconfirm=options.noconfirm,
    )


def get_reconciler(
    config: AurctlConfig,
    options: RunOptions,
    client: RegistryClient,
    registry: InstalledRegistry,
) -> Reconciler:
    """Create the reconciliation engine."""
    return Reconciler(
        client,
        registry,
        get_makepkg(config, options),
        config,
        options,
    )


def get_orchestrator(config: AurctlConfig, options: RunOptions) -> Orchestrator:
    """Create the build-unit orchestrator."""
    return Orchestrator(
        config,
        options,
        get_decisions(options.noconfirm),
        git=Git(),
        makepkg=get_makepkg(config, options),
        archive=RepoArchive(config.archive_path),
        editor=Editor(config.effective_editor),
    )


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Turn aurctl errors raised inside the block into a one-line message and exit 1.

    Raises:
        typer.Exit: If an AurctlError was raised.
    """
    try:
        yield
    except AurctlError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
