"""Update command implementation.

Checks every package of the local repository against the AUR and rebuilds
the outdated ones from their refreshed mirrors.
"""

import logging

import typer

from aurctl.cli.display import print_outdated_table
from aurctl.cli.types import (
    DevelOption,
    ForceOption,
    NoConfirmOption,
    NoEditOption,
    exit_on_error,
    get_config,
    get_installed_registry,
    get_orchestrator,
    get_reconciler,
    get_registry_client,
)
from aurctl.core.config import RunOptions
from aurctl.utils.formatting import print_info, print_success

logger = logging.getLogger(__name__)


def update(
    ctx: typer.Context,
    devel: DevelOption = False,
    force: ForceOption = False,
    noedit: NoEditOption = False,
    noconfirm: NoConfirmOption = False,
) -> None:
    """Rebuild outdated packages of the local repository.

    Examples:
        aurctl update                   # Rebuild packages with a newer AUR version
        aurctl update --devel           # Also check *-git packages against upstream
        aurctl update --noconfirm       # Unattended run
    """
    config = get_config(ctx)
    options = RunOptions(force=force, devel=devel, noedit=noedit, noconfirm=noconfirm)

    with exit_on_error():
        registry = get_installed_registry(config)
        names = registry.names()
        logger.debug("%d package(s) in the local repository", len(names))

        with get_registry_client(config) as client:
            outdated = get_reconciler(config, options, client, registry).reconcile(names)

        if not outdated:
            print_info("there is nothing to do")
            return

        print_outdated_table(outdated)
        built = get_orchestrator(config, options).update(outdated)

    print_success(f"{len(built)} package base(s) updated.")
