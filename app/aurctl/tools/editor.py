"""External editor used to review build recipes."""

import shlex
from pathlib import Path

from aurctl.utils.shell import check_interactive


class Editor:
    """Opens files in a user-chosen editor and waits for it to exit."""

    def __init__(self, command: str = "vim") -> None:
        """Initialize the editor.

        Args:
            command: Editor command line, may include arguments ("code --wait").
        """
        self._command = shlex.split(command) or ["vim"]

    def edit(self, path: Path) -> None:
        """Open a file and block until the editor exits.

        Raises:
            CommandError: If the editor exits non-zero.
        """
        check_interactive([*self._command, str(path)])
