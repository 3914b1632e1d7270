"""makepkg wrapper.

Builds run inside the package base mirror with package files written to
the cache (PKGDEST) and the build tree in a scratch directory (BUILDDIR).
"""

import logging
from pathlib import Path

from aurctl.utils.shell import check_command, check_interactive

logger = logging.getLogger(__name__)


def parse_package_filename(path: str) -> tuple[str, str] | None:
    """Split a package file name into package name and version.

    Package files are named ``<name>-<pkgver>-<pkgrel>-<arch>.pkg.tar<.ext>``;
    neither pkgver, pkgrel nor arch may contain a dash.

    Args:
        path: File name or path of a package file.

    Returns:
        Tuple of (name, "pkgver-pkgrel"), or None if the name does not match.
    """
    filename = Path(path).name
    if ".pkg.tar" not in filename:
        return None
    parts = filename.rsplit("-", 3)
    if len(parts) != 4 or not all(parts):
        return None
    name, pkgver, pkgrel, _arch = parts
    return name, f"{pkgver}-{pkgrel}"


class Makepkg:
    """Runs makepkg for package bases mirrored in the cache."""

    def __init__(
        self,
        pkgdest: Path,
        builddir: Path,
        *,
        noconfirm: bool = False,
        executable: str = "makepkg",
    ) -> None:
        """Initialize the wrapper.

        Args:
            pkgdest: Directory receiving built packages (the cache).
            builddir: Scratch build directory.
            noconfirm: Pass --noconfirm so dependency installs do not prompt.
            executable: makepkg executable.
        """
        self._pkgdest = pkgdest
        self._builddir = builddir
        self._noconfirm = noconfirm
        self._makepkg = executable

    @property
    def env(self) -> dict[str, str]:
        """Environment overrides for every makepkg run."""
        return {"PKGDEST": str(self._pkgdest), "BUILDDIR": str(self._builddir)}

    def _cwd(self, base: str) -> str:
        return str(self._pkgdest / base)

    def build(self, base: str) -> None:
        """Build a package base, installing missing dependencies.

        Runs attached to the terminal since pacman may ask for a password.

        Raises:
            CommandError: If the build fails.
        """
        args = [self._makepkg, "--force", "--syncdeps"]
        if self._noconfirm:
            args.append("--noconfirm")
        logger.info("Building %s", base)
        check_interactive(args, cwd=self._cwd(base), env=self.env)

    def package_list(self, base: str) -> list[str]:
        """List the package files the recipe produces.

        Returns:
            Absolute paths of the package files inside PKGDEST.

        Raises:
            CommandError: If makepkg fails.
        """
        result = check_command(
            [self._makepkg, "--packagelist"], cwd=self._cwd(base), env=self.env
        )
        return result.stdout.split()

    def vcs_versions(self, base: str) -> dict[str, str]:
        """Compute the versions a development recipe would build right now.

        Fetches and extracts the sources without building, which lets the
        recipe's pkgver() derive the version from version control, then
        reads the resulting package file names.

        Returns:
            Mapping of package name to "pkgver-pkgrel" for every package
            of the base.

        Raises:
            CommandError: If makepkg fails.
        """
        logger.info("Resolving development version of %s", base)
        check_command(
            [self._makepkg, "--nobuild", "--nodeps", "--noprepare"],
            cwd=self._cwd(base),
            env=self.env,
        )
        versions: dict[str, str] = {}
        for path in self.package_list(base):
            parsed = parse_package_filename(path)
            if parsed is None:
                logger.debug("Ignoring unexpected package list entry %r", path)
                continue
            name, version = parsed
            versions[name] = version
        return versions
