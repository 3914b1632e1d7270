"""Build-unit orchestration.

Drives the per-unit lifecycle for an outdated set:

- sync:   [clone if no mirror] -> review -> build -> publish
- update: fetch -> [show diff] -> merge -> review -> build -> publish

A single confirmation covers the whole batch. Units are processed one
after the other; the first failing command stops the run, and units
published before it stay published. With --noconfirm the run is
unattended: no PKGBUILD review and no diff are offered.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from aurctl.core.errors import AbortedError
from aurctl.core.paths import ensure_cache_dir
from aurctl.core.reconcile import group_by_base
from aurctl.models.package import BuildUnit
from aurctl.utils.formatting import print_action

if TYPE_CHECKING:
    from aurctl.core.config import AurctlConfig, RunOptions
    from aurctl.core.prompt import Decisions
    from aurctl.models.package import ReconciledPackage
    from aurctl.tools.editor import Editor
    from aurctl.tools.git import Git
    from aurctl.tools.makepkg import Makepkg
    from aurctl.tools.repo import RepoArchive

logger = logging.getLogger(__name__)


class Orchestrator:
    """Sequences mirror, review, build and publish steps per build unit."""

    def __init__(
        self,
        config: AurctlConfig,
        options: RunOptions,
        decisions: Decisions,
        *,
        git: Git,
        makepkg: Makepkg,
        archive: RepoArchive,
        editor: Editor,
    ) -> None:
        self._config = config
        self._options = options
        self._decisions = decisions
        self._git = git
        self._makepkg = makepkg
        self._archive = archive
        self._editor = editor

    def mirror_path(self, base: str) -> Path:
        """Mirror directory of a package base."""
        return self._config.effective_cache_dir / base

    def sync(self, packages: Sequence[ReconciledPackage]) -> list[BuildUnit]:
        """Build and publish explicitly requested packages.

        Args:
            packages: Outdated packages from the reconciliation engine.

        Returns:
            The units that were built, in processing order.

        Raises:
            AbortedError: If the batch is declined; nothing is changed.
            CommandError: If any external command fails.
        """
        units = group_by_base(packages)
        self._confirm_batch("Proceed with synchronising?")

        built: list[BuildUnit] = []
        for unit in units:
            print_action(f"Syncing: {unit.base}")
            mirror = self.mirror_path(unit.base)
            if not mirror.exists():
                self._git.clone(self._config.clone_url(unit.base), mirror)
            self._review(mirror)
            self._build(unit)
            built.append(unit)
        return built

    def update(self, packages: Sequence[ReconciledPackage]) -> list[BuildUnit]:
        """Bring the mirrors of installed packages up to date and rebuild them.

        Args:
            packages: Outdated packages from the reconciliation engine.

        Returns:
            The units that were built, in processing order.

        Raises:
            AbortedError: If the batch is declined; nothing is changed.
            CommandError: If any external command fails.
        """
        units = group_by_base(packages)
        self._confirm_batch("Proceed with updating?")

        built: list[BuildUnit] = []
        for unit in units:
            print_action(f"Updating: {unit.base}")
            mirror = self.mirror_path(unit.base)
            if mirror.exists():
                self._refresh(mirror)
            else:
                logger.warning("No mirror for %s, cloning it", unit.base)
                self._git.clone(self._config.clone_url(unit.base), mirror)
            self._review(mirror)
            self._build(unit)
            built.append(unit)
        return built

    def _confirm_batch(self, question: str) -> None:
        if not self._decisions.confirm(question):
            raise AbortedError("operation cancelled")
        ensure_cache_dir(self._config.effective_cache_dir)

    def _refresh(self, mirror: Path) -> None:
        """Fetch upstream, offer the diff, then fast-forward the mirror."""
        self._git.fetch(mirror)
        if (
            self._git.has_changes(mirror)
            and not self._options.noconfirm
            and self._decisions.confirm("Show diff?")
        ):
            self._git.show_diff(mirror)
        self._git.merge(mirror)

    def _review(self, mirror: Path) -> None:
        # --noconfirm implies --noedit
        if self._options.noedit or self._options.noconfirm:
            return
        if self._decisions.confirm("Edit PKGBUILD?"):
            self._editor.edit(mirror / "PKGBUILD")

    def _build(self, unit: BuildUnit) -> list[str]:
        """Build a unit and publish its package files to the archive."""
        self._makepkg.build(unit.base)
        files = self._makepkg.package_list(unit.base)
        self._archive.add(files)
        logger.info("Published %s: %s", unit.base, ", ".join(files))
        return files
