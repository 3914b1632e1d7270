"""Search command implementation."""

from typing import Annotated

import typer

from aurctl.cli.display import print_search_results
from aurctl.cli.types import exit_on_error, get_config, get_registry_client
from aurctl.core.reconcile import sort_search_results


def search(
    ctx: typer.Context,
    terms: Annotated[
        list[str],
        typer.Argument(help="Search term.", show_default=False),
    ],
) -> None:
    """Search the AUR by name and description.

    The most popular results are printed last, closest to the prompt.
    """
    config = get_config(ctx)
    term = " ".join(terms)

    with exit_on_error(), get_registry_client(config) as client:
        records = client.search(term)

    print_search_results(sort_search_results(records))
