"""Local repository archive wrapper (repo-add / repo-remove)."""

import logging
from collections.abc import Sequence
from pathlib import Path

from aurctl.utils.shell import check_interactive

logger = logging.getLogger(__name__)


class RepoArchive:
    """The local pacman repository database kept in the cache.

    Attributes:
        path: Path of the archive, e.g. ~/.cache/aur/aur.db.tar.gz.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def add(self, files: Sequence[str]) -> None:
        """Add package files, dropping older files of the same packages.

        ``--remove`` deletes the superseded package files from disk, so the
        archive only references the new build afterwards.

        Raises:
            CommandError: If repo-add fails.
        """
        if not files:
            return
        logger.info("Adding %d package(s) to %s", len(files), self.path)
        check_interactive(["repo-add", "--remove", str(self.path), *files])

    def remove(self, names: Sequence[str]) -> None:
        """Remove packages from the archive by name.

        Raises:
            CommandError: If repo-remove fails.
        """
        if not names:
            return
        logger.info("Removing %s from %s", ", ".join(names), self.path)
        check_interactive(["repo-remove", str(self.path), *names])
