"""Tests for the clean command."""

from unittest.mock import MagicMock, patch

import pytest
from aurctl.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

MODULE = "aurctl.cli.commands.clean"


@pytest.fixture
def cache(config):
    cache_dir = config.effective_cache_dir
    (cache_dir / "yay").mkdir(parents=True)
    (cache_dir / "stale").mkdir()
    (cache_dir / "aur.db.tar.gz").write_text("")
    return cache_dir


@pytest.fixture
def patched(config, memory_registry):
    git = MagicMock()
    with (
        patch(f"{MODULE}.get_config", return_value=config),
        patch(f"{MODULE}.get_installed_registry", return_value=memory_registry),
        patch(f"{MODULE}.Git", return_value=git),
    ):
        yield git


class TestCleanCommand:
    """Tests for aurctl clean."""

    def test_removes_stale_entries(self, cache, patched) -> None:
        result = runner.invoke(app, ["clean"])

        assert result.exit_code == 0
        assert "removed stale" in result.output
        assert "Removed 1 cache entry." in result.output
        assert not (cache / "stale").exists()
        assert (cache / "yay").exists()
        patched.clean.assert_called_once_with(cache / "yay")

    def test_dry_run(self, cache, patched) -> None:
        result = runner.invoke(app, ["clean", "--dry-run"])

        assert result.exit_code == 0
        assert "would remove stale" in result.output
        assert "Would remove 1 cache entry." in result.output
        assert (cache / "stale").exists()
        patched.clean.assert_not_called()

    def test_empty_cache(self, patched) -> None:
        result = runner.invoke(app, ["clean"])

        assert result.exit_code == 0
        assert "Removed 0 cache entries." in result.output
