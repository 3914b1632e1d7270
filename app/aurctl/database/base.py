"""Abstract interface to the installed-package registry.

The reconciliation engine and the cache sweep only need four things from
the package database: the installed version of a package, the installed
package names, the base and file name of every installed package, and
version comparison. Anything that provides them can stand in for pacman.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from aurctl.models.package import InstalledPackage


class InstalledRegistry(ABC):
    """Abstract base class for installed-package registries.

    Example:
        >>> registry = SyncDatabase(Path("/var/lib/pacman/sync/aur.db"))
        >>> registry.version("yay")
        '12.4.2-1'
        >>> registry.compare("12.4.2-1", "12.3.5-1")
        1
    """

    @abstractmethod
    def packages(self) -> Iterator[InstalledPackage]:
        """Yield every installed package.

        Raises:
            DatabaseError: If the registry cannot be read.
        """

    @abstractmethod
    def compare(self, a: str, b: str) -> int:
        """Compare two version strings.

        Returns:
            A negative number if a is older than b, zero if equal,
            a positive number if a is newer.
        """

    def version(self, name: str) -> str | None:
        """Return the installed version of a package, None if not installed."""
        for pkg in self.packages():
            if pkg.name == name:
                return pkg.version
        return None

    def names(self) -> list[str]:
        """Return the names of all installed packages."""
        return [pkg.name for pkg in self.packages()]
