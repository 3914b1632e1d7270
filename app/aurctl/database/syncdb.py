"""pacman sync database reader.

Packages built by aurctl are published to a local repository which pacman
syncs like any other. The synced database is a tar archive holding one
``<name>-<version>/desc`` entry per package, e.g.::

    %FILENAME%
    yay-12.4.2-1-x86_64.pkg.tar.zst

    %NAME%
    yay

    %BASE%
    yay

    %VERSION%
    12.4.2-1

Version ordering follows pacman's own rules via the ``vercmp`` tool.
"""

import logging
import tarfile
from collections.abc import Iterator
from pathlib import Path

from aurctl.core.errors import DatabaseError
from aurctl.database.base import InstalledRegistry
from aurctl.models.package import InstalledPackage
from aurctl.utils.shell import check_command

logger = logging.getLogger(__name__)


def parse_desc(text: str) -> dict[str, list[str]]:
    """Parse a pacman ``desc`` file into its sections.

    Args:
        text: File content.

    Returns:
        Mapping of section name (without percent signs) to its value lines.
    """
    sections: dict[str, list[str]] = {}
    current: list[str] | None = None

    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith("%") and line.endswith("%") and len(line) > 2:
            current = sections.setdefault(line[1:-1], [])
        elif not line:
            current = None
        elif current is not None:
            current.append(line)

    return sections


def _to_package(sections: dict[str, list[str]]) -> InstalledPackage | None:
    name = sections.get("NAME", [""])[0]
    version = sections.get("VERSION", [""])[0]
    if not name or not version:
        return None
    # Split packages list their base; single packages may omit it
    base = sections.get("BASE", [name])[0]
    filename = sections.get("FILENAME", [""])[0]
    return InstalledPackage(name=name, version=version, base=base, filename=filename)


class SyncDatabase(InstalledRegistry):
    """Installed registry backed by pacman's synced copy of the local repository.

    The archive is read once, on first access. A missing database file means
    the repository has never been synced, so nothing is installed.
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the sync database, e.g. /var/lib/pacman/sync/aur.db.
        """
        self._path = path
        self._packages: list[InstalledPackage] | None = None

    @property
    def path(self) -> Path:
        """Path of the sync database."""
        return self._path

    def packages(self) -> Iterator[InstalledPackage]:
        """Yield every package listed in the sync database.

        Raises:
            DatabaseError: If the archive exists but cannot be read.
        """
        if self._packages is None:
            self._packages = self._load()
        yield from self._packages

    def version(self, name: str) -> str | None:
        """Return the version of a package in the database, None if absent."""
        if self._packages is None:
            self._packages = self._load()
        by_name = {pkg.name: pkg.version for pkg in self._packages}
        return by_name.get(name)

    def compare(self, a: str, b: str) -> int:
        """Compare two versions with pacman's vercmp.

        Raises:
            CommandError: If vercmp is missing or fails.
            DatabaseError: If vercmp prints something unexpected.
        """
        result = check_command(["vercmp", a, b])
        try:
            return int(result.stdout.strip())
        except ValueError as e:
            msg = f"Unexpected vercmp output for {a!r} {b!r}: {result.stdout!r}"
            raise DatabaseError(msg) from e

    def _load(self) -> list[InstalledPackage]:
        if not self._path.exists():
            logger.warning("Sync database %s not found, assuming no packages", self._path)
            return []

        packages: list[InstalledPackage] = []
        try:
            with tarfile.open(self._path, "r:*") as archive:
                for member in archive:
                    if not member.isfile() or not member.name.endswith("/desc"):
                        continue
                    handle = archive.extractfile(member)
                    if handle is None:
                        continue
                    sections = parse_desc(handle.read().decode("utf-8", errors="replace"))
                    package = _to_package(sections)
                    if package is None:
                        logger.debug("Skipping incomplete entry %s", member.name)
                        continue
                    packages.append(package)
        except (tarfile.TarError, OSError) as e:
            raise DatabaseError(f"Cannot read sync database {self._path}: {e}") from e

        logger.debug("Loaded %d package(s) from %s", len(packages), self._path)
        return packages
