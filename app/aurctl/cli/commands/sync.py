"""Sync command implementation.

Builds explicitly requested AUR packages: reconcile the names against the
local repository, show what will be built, then clone, review, build and
publish each package base.
"""

import logging
from typing import Annotated

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


def sync(
    ctx: typer.Context,
    names: Annotated[
        list[str],
        typer.Argument(help="Packages to build.", show_default=False),
    ],
    devel: DevelOption = False,
    force: ForceOption = False,
    noedit: NoEditOption = False,
    noconfirm: NoConfirmOption = False,
) -> None:
    """Build and publish AUR packages.

    Examples:
        aurctl sync yay                 # Build yay if missing or outdated
        aurctl sync --force yay         # Rebuild yay unconditionally
        aurctl sync --noedit a b c      # Build several without PKGBUILD review
    """
    config = get_config(ctx)
    options = RunOptions(force=force, devel=devel, noedit=noedit, noconfirm=noconfirm)

    with exit_on_error():
        registry = get_installed_registry(config)
        with get_registry_client(config) as client:
            outdated = get_reconciler(config, options, client, registry).reconcile(names)

        if not outdated:
            print_info("there is nothing to do")
            return

        print_outdated_table(outdated)
        built = get_orchestrator(config, options).sync(outdated)

    logger.debug("Synced %d package base(s)", len(built))
    print_success(f"{len(built)} package base(s) built.")
