"""Shared display functions for package listings.

Provides the pacman-style outdated table printed before a sync or update
and the search result listing.
"""

from collections.abc import Sequence

from rich.markup import escape

from aurctl.models.package import ReconciledPackage, RemotePackage
from aurctl.utils.formatting import console

OLD_VERSION_LABEL = "Old Version"
NEW_VERSION_LABEL = "New Version"


def format_outdated_table(packages: Sequence[ReconciledPackage]) -> tuple[str, list[str]]:
    """Lay out the outdated packages as column-aligned text.

    The name column fits the longest name and at least the "Package (N)"
    header. When at least one package is installed, an old version column
    sized to the longest installed version precedes the new version;
    otherwise only the new version is shown.

    Args:
        packages: Outdated packages.

    Returns:
        Tuple of (header line, row lines). Rows are sorted by package name.
    """
    label = f"Package ({len(packages)})"
    name_width = max([len(label), *(len(p.name) for p in packages)])
    version_width = max([0, *(len(p.local_version) for p in packages)])
    if version_width:
        version_width = max(version_width, len(OLD_VERSION_LABEL))

    if version_width:
        header = f"{label:<{name_width}}  {OLD_VERSION_LABEL:<{version_width}}  {NEW_VERSION_LABEL}"
    else:
        header = f"{label:<{name_width}}  {NEW_VERSION_LABEL}"

    rows: list[str] = []
    for pkg in sorted(packages, key=lambda p: p.name):
        if version_width:
            rows.append(
                f"{pkg.name:<{name_width}}  {pkg.local_version:<{version_width}}  {pkg.version}"
            )
        else:
            rows.append(f"{pkg.name:<{name_width}}  {pkg.version}")

    return header, rows


def print_outdated_table(packages: Sequence[ReconciledPackage]) -> None:
    """Print the outdated table framed by blank lines."""
    header, rows = format_outdated_table(packages)
    console.print()
    console.print(header, style="bold", markup=False)
    console.print()
    for row in rows:
        console.print(row, markup=False)
    console.print()


def format_search_result(record: RemotePackage) -> str:
    """Format one search result as Rich markup.

    Layout: ``aur/<name> <version> [<votes> <popularity>] [<flag date>]``
    followed by the indented description on the next line.
    """
    line = (
        f"[repo]aur/[/repo][package.name]{escape(record.name)}[/package.name] "
        f"[version.new]{escape(record.version)}[/version.new] "
        f"[stats]\\[{record.num_votes} {record.popularity:f}][/stats]"
    )
    if record.flagged_on is not None:
        line += f" [flagged]{record.flagged_on.isoformat()}[/flagged]"
    return f"{line}\n    {escape(record.description or '')}"


def print_search_results(records: Sequence[RemotePackage]) -> None:
    """Print search results in the given order."""
    for record in records:
        console.print(format_search_result(record))
