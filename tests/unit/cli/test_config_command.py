"""Tests for the config commands."""

from aurctl.cli.main import app
from aurctl.core.config import AurctlConfig, load_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for aurctl config show."""

    def test_shows_file_values(self, tmp_path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('repo_name = "custom"\n')

        result = runner.invoke(app, ["--config", str(path), "config", "show"])

        assert result.exit_code == 0
        assert "custom" in result.output

    def test_invalid_config(self, tmp_path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("nonsense = 1\n")

        result = runner.invoke(app, ["--config", str(path), "config", "show"])

        assert result.exit_code == 1
        assert "Invalid config content" in result.output


class TestConfigInit:
    """Tests for aurctl config init."""

    def test_writes_defaults(self, tmp_path) -> None:
        path = tmp_path / "aurctl" / "config.toml"

        result = runner.invoke(app, ["--config", str(path), "config", "init"])

        assert result.exit_code == 0
        assert load_config(path) == AurctlConfig()

    def test_refuses_to_overwrite(self, tmp_path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('repo_name = "custom"\n')

        result = runner.invoke(app, ["--config", str(path), "config", "init"])

        assert result.exit_code == 1
        assert load_config(path).repo_name == "custom"

    def test_force_overwrites(self, tmp_path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('repo_name = "custom"\n')

        result = runner.invoke(app, ["--config", str(path), "config", "init", "--force"])

        assert result.exit_code == 0
        assert load_config(path).repo_name == "aur"
