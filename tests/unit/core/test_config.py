"""Unit tests for configuration loading and per-run options."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest
from aurctl.core.config import AurctlConfig, RunOptions, load_config, save_config
from aurctl.core.errors import ConfigError
from pydantic import ValidationError


class TestAurctlConfig:
    """Tests for AurctlConfig defaults and derived values."""

    def test_defaults(self) -> None:
        """Defaults target the official AUR and a repository named aur."""
        config = AurctlConfig()

        assert config.repo_name == "aur"
        assert config.effective_rpc_url == "https://aur.archlinux.org/rpc/v5"
        assert config.sync_db_path == Path("/var/lib/pacman/sync/aur.db")

    def test_rpc_url_derived_from_aur_url(self) -> None:
        """A custom AUR URL moves the RPC endpoint along."""
        config = AurctlConfig(aur_url="https://aur.example.org/")

        assert config.effective_rpc_url == "https://aur.example.org/rpc/v5"
        assert config.clone_url("yay") == "https://aur.example.org/yay.git"

    def test_explicit_rpc_url_wins(self) -> None:
        """rpc_url overrides the derived endpoint."""
        config = AurctlConfig(rpc_url="http://localhost:8080/rpc/")

        assert config.effective_rpc_url == "http://localhost:8080/rpc"

    def test_cache_dir_follows_xdg(self, tmp_path, monkeypatch) -> None:
        """Without cache_dir the cache lives under XDG_CACHE_HOME/<repo>."""
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
        config = AurctlConfig(repo_name="custom")

        assert config.effective_cache_dir == tmp_path / "custom"
        assert config.archive_path == tmp_path / "custom" / "custom.db.tar.gz"

    def test_editor_fallbacks(self, monkeypatch) -> None:
        """The editor comes from config, then $VISUAL, then $EDITOR, then vim."""
        monkeypatch.delenv("VISUAL", raising=False)
        monkeypatch.delenv("EDITOR", raising=False)
        assert AurctlConfig().effective_editor == "vim"

        monkeypatch.setenv("EDITOR", "nano")
        assert AurctlConfig().effective_editor == "nano"

        monkeypatch.setenv("VISUAL", "code --wait")
        assert AurctlConfig().effective_editor == "code --wait"
        assert AurctlConfig(editor="emacs").effective_editor == "emacs"

    def test_is_devel(self) -> None:
        """Development packages are recognised by suffix."""
        config = AurctlConfig(devel_suffixes=("-git", "-hg"))

        assert config.is_devel("neovim-git")
        assert config.is_devel("foo-hg")
        assert not config.is_devel("yay")

    def test_frozen(self) -> None:
        """Configuration cannot change after startup."""
        config = AurctlConfig()

        with pytest.raises(ValidationError):
            config.repo_name = "other"  # type: ignore[misc]

    def test_rejects_unknown_keys(self) -> None:
        """Typos in keys are reported instead of ignored."""
        with pytest.raises(ValidationError):
            AurctlConfig.model_validate({"repo": "aur"})

    def test_timeout_bounds(self) -> None:
        """Timeout must be positive."""
        with pytest.raises(ValidationError):
            AurctlConfig(timeout_seconds=0)


class TestRunOptions:
    """Tests for RunOptions."""

    def test_defaults_are_off(self) -> None:
        """Every flag defaults to off."""
        options = RunOptions()

        assert not (options.force or options.devel or options.noedit or options.noconfirm)

    def test_immutable(self) -> None:
        """Options cannot be changed mid-run."""
        options = RunOptions()

        with pytest.raises(FrozenInstanceError):
            options.force = True  # type: ignore[misc]


class TestLoadConfig:
    """Tests for load_config and save_config."""

    def test_missing_file_returns_defaults(self, tmp_path) -> None:
        """No config file means default settings."""
        assert load_config(tmp_path / "config.toml") == AurctlConfig()

    def test_loads_values(self, tmp_path) -> None:
        """Values from the file override defaults."""
        path = tmp_path / "config.toml"
        path.write_text('repo_name = "custom"\ndevel_suffixes = ["-git", "-svn"]\n')

        config = load_config(path)

        assert config.repo_name == "custom"
        assert config.devel_suffixes == ("-git", "-svn")

    def test_invalid_toml(self, tmp_path) -> None:
        """Broken TOML is a ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text("repo_name = \n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_content(self, tmp_path) -> None:
        """Unknown keys are a ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('colour = "red"\n')

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)

    def test_save_then_load(self, tmp_path) -> None:
        """A saved config loads back equal, unset values omitted."""
        path = tmp_path / "nested" / "config.toml"
        config = AurctlConfig(repo_name="custom", cache_dir=tmp_path / "cache")

        saved = save_config(config, path)

        assert saved == path
        assert "rpc_url" not in path.read_text()
        assert load_config(path) == config
        assert not list(path.parent.glob("*.tmp"))
