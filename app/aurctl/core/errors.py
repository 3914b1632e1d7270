"""Exception hierarchy for aurctl.

Components raise these instead of terminating the process. The CLI layer
turns any AurctlError into a single error line and a non-zero exit code.
"""

from collections.abc import Iterable, Sequence


class AurctlError(Exception):
    """Base exception for all fatal aurctl conditions."""


class TargetNotFoundError(AurctlError):
    """Raised when requested package names are unknown to the registry.

    Attributes:
        names: Every unresolved name, sorted.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self.names = sorted(names)
        super().__init__(f"target not found: {' '.join(self.names)}")


class RegistryError(AurctlError):
    """Raised when the remote registry cannot be reached or decoded."""


class CommandError(AurctlError):
    """Raised when an external command exits with a non-zero status.

    Attributes:
        command: The command line that failed.
        returncode: Exit status of the command.
    """

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"{self.command[0]} exited with status {returncode}"
        if stderr.strip():
            msg = f"{msg}: {stderr.strip()}"
        super().__init__(msg)


class AbortedError(AurctlError):
    """Raised when the user declines or interrupts a confirmation prompt."""


class DatabaseError(AurctlError):
    """Raised when the installed-package database cannot be read."""


class ConfigError(AurctlError):
    """Raised when the configuration file cannot be read or validated."""
