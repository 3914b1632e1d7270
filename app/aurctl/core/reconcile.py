"""Reconciliation engine.

Turns a registry fetch into the set of packages that need rebuilding:

1. fetch the records of the requested names,
2. reject the request if any name is unknown upstream,
3. warn about flagged and orphaned packages,
4. look up installed versions, resolving development packages from source,
5. keep a package if forced or if the candidate version is newer.

Also provides the search ordering and the grouping of outdated packages
into build units.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from aurctl.core.errors import TargetNotFoundError
from aurctl.models.package import BuildUnit, ReconciledPackage, RemotePackage
from aurctl.utils.formatting import print_warning

if TYPE_CHECKING:
    from aurctl.core.config import AurctlConfig, RunOptions
    from aurctl.database.base import InstalledRegistry
    from aurctl.registry.client import RegistryClient
    from aurctl.tools.makepkg import Makepkg

logger = logging.getLogger(__name__)


def find_missing(names: Iterable[str], records: Iterable[RemotePackage]) -> set[str]:
    """Return the requested names that have no record."""
    return set(names) - {record.name for record in records}


def is_outdated(registry: InstalledRegistry, version: str, local_version: str, force: bool) -> bool:
    """Decide whether a package must be (re)built.

    Args:
        registry: Provides the version comparator.
        version: Candidate version.
        local_version: Installed version, empty if not installed.
        force: Rebuild regardless of versions.

    Returns:
        True if forced, not installed, or the candidate is newer.
    """
    if force or not local_version:
        return True
    return registry.compare(version, local_version) > 0


def sort_search_results(records: Iterable[RemotePackage]) -> list[RemotePackage]:
    """Order search results so the most relevant ones print last.

    Stable sort by popularity, then votes, both ascending.
    """
    return sorted(records, key=lambda r: (r.popularity, r.num_votes))


def group_by_base(packages: Iterable[ReconciledPackage]) -> list[BuildUnit]:
    """Group packages into build units, one per package base.

    Units come out in the order their first package appears. No
    dependency ordering is attempted.
    """
    members: dict[str, list[str]] = {}
    for pkg in packages:
        members.setdefault(pkg.base, []).append(pkg.name)
    return [BuildUnit(base=base, packages=tuple(names)) for base, names in members.items()]


class Reconciler:
    """Matches registry records against the installed registry.

    Attributes:
        client: Registry client used to fetch records.
        registry: Installed-package registry.
        makepkg: Build tool, used to resolve development versions.
        config: Persistent configuration (devel suffixes).
        options: Flags of the current run.
    """

    def __init__(
        self,
        client: RegistryClient,
        registry: InstalledRegistry,
        makepkg: Makepkg,
        config: AurctlConfig,
        options: RunOptions,
    ) -> None:
        self.client = client
        self.registry = registry
        self.makepkg = makepkg
        self.config = config
        self.options = options

    def reconcile(self, names: Iterable[str]) -> list[ReconciledPackage]:
        """Compute the outdated packages among the requested names.

        Args:
            names: Package names to check.

        Returns:
            Outdated packages sorted by name. Empty when there is nothing to do.

        Raises:
            TargetNotFoundError: If any name is unknown upstream.
            RegistryError: If the registry request fails.
            CommandError: If resolving a development version fails.
        """
        requested = set(names)
        if not requested:
            return []

        records = self.client.fetch(requested)

        missing = find_missing(requested, records)
        if missing:
            raise TargetNotFoundError(missing)

        for record in records:
            if record.is_flagged:
                print_warning(f"{record.name} is flagged out of date ({record.flagged_on})")
            if record.is_orphan:
                print_warning(f"{record.name} is orphan")

        vcs_cache: dict[str, dict[str, str]] = {}
        outdated: list[ReconciledPackage] = []

        for record in records:
            local_version = self.registry.version(record.name) or ""
            version = record.version

            if local_version and self.options.devel and self.config.is_devel(record.name):
                version = self._devel_version(record, vcs_cache)

            if is_outdated(self.registry, version, local_version, self.options.force):
                outdated.append(
                    ReconciledPackage(remote=record, version=version, local_version=local_version)
                )
            else:
                logger.debug("%s %s is up to date", record.name, local_version)

        outdated.sort(key=lambda p: p.name)
        return outdated

    def _devel_version(self, record: RemotePackage, cache: dict[str, dict[str, str]]) -> str:
        """Version a development package would build from its current sources.

        The version map of a base is computed once per reconciliation; only
        the entry of this package is used.
        """
        base = record.package_base
        if base not in cache:
            cache[base] = self.makepkg.vcs_versions(base)

        version = cache[base].get(record.name)
        if version is None:
            logger.warning(
                "makepkg did not list %s for base %s, keeping published version %s",
                record.name,
                base,
                record.version,
            )
            return record.version
        return version
