"""git wrapper for package base mirrors.

Each package base is mirrored as a git checkout of its AUR repository.
A mirror is cloned once and afterwards only fetched and merged in place.
"""

import logging
from pathlib import Path

from aurctl.core.errors import CommandError
from aurctl.utils.shell import check_command, check_interactive, run_command

logger = logging.getLogger(__name__)


class Git:
    """Runs git commands against a mirror directory."""

    def __init__(self, executable: str = "git") -> None:
        self._git = executable

    def _args(self, mirror: Path, *args: str) -> list[str]:
        return [self._git, "-C", str(mirror), *args]

    def clone(self, url: str, mirror: Path) -> None:
        """Clone a repository into a new mirror directory.

        Raises:
            CommandError: If git clone fails.
        """
        logger.info("Cloning %s into %s", url, mirror)
        check_command([self._git, "clone", "--quiet", url, str(mirror)])

    def fetch(self, mirror: Path) -> None:
        """Fetch remote refs into the mirror.

        Raises:
            CommandError: If git fetch fails.
        """
        check_command(self._args(mirror, "fetch", "--quiet"))

    def has_changes(self, mirror: Path) -> bool:
        """Check whether the fetched head differs from the local head.

        ``git diff --quiet`` exits 1 when the trees differ; that is an
        answer, not a failure.

        Raises:
            CommandError: If git diff fails for any other reason.
        """
        args = self._args(mirror, "diff", "--quiet", "HEAD", "FETCH_HEAD")
        try:
            result = run_command(args)
        except OSError as e:
            raise CommandError(args, 127, str(e)) from e
        if result.returncode == 0:
            return False
        if result.returncode == 1:
            return True
        raise CommandError(args, result.returncode, result.stderr)

    def show_diff(self, mirror: Path) -> None:
        """Show the pending upstream changes on the terminal.

        Raises:
            CommandError: If git diff fails.
        """
        check_interactive(self._args(mirror, "diff", "HEAD", "FETCH_HEAD"))

    def merge(self, mirror: Path) -> None:
        """Merge the fetched head into the working tree.

        Raises:
            CommandError: If git merge fails.
        """
        check_command(self._args(mirror, "merge", "--quiet"))

    def clean(self, mirror: Path) -> None:
        """Remove untracked and ignored files, keeping the recipe history.

        Raises:
            CommandError: If git clean fails.
        """
        check_command(self._args(mirror, "clean", "-d", "-f", "-x", "--quiet"))
