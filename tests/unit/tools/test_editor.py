"""Unit tests for the editor wrapper."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from aurctl.tools.editor import Editor


class TestEditor:
    """Tests for Editor."""

    @patch("aurctl.tools.editor.check_interactive")
    def test_command_with_arguments(self, mock_interactive: MagicMock) -> None:
        Editor("code --wait").edit(Path("/cache/yay/PKGBUILD"))

        mock_interactive.assert_called_once_with(["code", "--wait", "/cache/yay/PKGBUILD"])

    @patch("aurctl.tools.editor.check_interactive")
    def test_blank_command_falls_back_to_vim(self, mock_interactive: MagicMock) -> None:
        Editor("  ").edit(Path("PKGBUILD"))

        mock_interactive.assert_called_once_with(["vim", "PKGBUILD"])
