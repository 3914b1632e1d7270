"""Cache sweep.

Reclaims space in the package cache. An entry survives when its name is
the base of an installed package (a mirror), the file name of an installed
package, or belongs to the repository archive itself (``<repo>.*``).
Surviving mirrors are cleaned of build leftovers with ``git clean``;
everything else is deleted.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from aurctl.core.errors import AurctlError
from aurctl.utils.formatting import print_info

if TYPE_CHECKING:
    from aurctl.database.base import InstalledRegistry
    from aurctl.tools.git import Git

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SweepResult:
    """Outcome of a cache sweep.

    Attributes:
        cleaned: Mirrors that were cleaned in place.
        removed: Entries that were deleted (or would be, in dry-run mode).
        dry_run: Whether anything was actually modified.
    """

    cleaned: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    dry_run: bool = False


class CacheSweeper:
    """Removes cache entries no longer referenced by the installed registry."""

    def __init__(
        self,
        cache_dir: Path,
        repo_name: str,
        registry: InstalledRegistry,
        git: Git,
        *,
        dry_run: bool = False,
    ) -> None:
        """Initialize the sweeper.

        Args:
            cache_dir: Package cache directory.
            repo_name: Local repository name; ``<repo_name>.*`` files are kept.
            registry: Installed-package registry.
            git: git wrapper used to clean kept mirrors.
            dry_run: If True, report what would be removed without touching anything.
        """
        self._cache_dir = cache_dir
        self._repo_name = repo_name
        self._registry = registry
        self._git = git
        self._dry_run = dry_run

    def keep_set(self) -> set[str]:
        """Names of the cache entries still in use."""
        keep: set[str] = set()
        for pkg in self._registry.packages():
            keep.add(pkg.base)
            if pkg.filename:
                keep.add(pkg.filename)
        return keep

    def _is_kept(self, name: str, keep: set[str]) -> bool:
        return name in keep or name.startswith(f"{self._repo_name}.")

    def sweep(self) -> SweepResult:
        """Clean kept mirrors and delete unreferenced entries.

        Returns:
            SweepResult listing cleaned and removed entry names.

        Raises:
            CommandError: If git clean fails in a kept mirror.
            AurctlError: If an entry cannot be deleted.
        """
        result = SweepResult(dry_run=self._dry_run)
        if not self._cache_dir.is_dir():
            logger.info("Cache directory %s does not exist, nothing to sweep", self._cache_dir)
            return result

        keep = self.keep_set()
        entries = sorted(self._cache_dir.iterdir(), key=lambda p: p.name)

        print_info("removing old packages from cache...")
        garbage: list[Path] = []
        for entry in entries:
            if not self._is_kept(entry.name, keep):
                garbage.append(entry)
                continue
            if entry.is_dir() and not entry.is_symlink():
                if not self._dry_run:
                    self._git.clean(entry)
                result.cleaned.append(entry.name)

        print_info("removing unsynced packages...")
        for entry in garbage:
            if self._dry_run:
                logger.info("Dry-run: would delete %s", entry)
            else:
                try:
                    _delete(entry)
                except OSError as e:
                    raise AurctlError(f"Cannot delete {entry}: {e}") from e
            result.removed.append(entry.name)

        return result


def _delete(path: Path) -> None:
    """Delete a directory tree, file or symlink."""
    logger.debug("Deleting %s", path)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
