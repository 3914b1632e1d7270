"""Unit tests for the cache sweep."""

from unittest.mock import MagicMock

import pytest
from aurctl.core.errors import AurctlError
from aurctl.core.sweep import CacheSweeper


@pytest.fixture
def cache(tmp_path, memory_registry):
    """Cache holding kept and stale entries for memory_registry."""
    cache_dir = tmp_path / "cache"
    cache_dir.mkdir()
    for base in ("yay", "foo", "stale-base"):
        (cache_dir / base).mkdir()
        (cache_dir / base / "PKGBUILD").write_text("pkgname=x\n")
    for pkg in memory_registry.packages():
        (cache_dir / pkg.filename).write_text("")
    (cache_dir / "yay-11.0.0-1-x86_64.pkg.tar.zst").write_text("")
    (cache_dir / "aur.db.tar.gz").write_text("")
    (cache_dir / "aur.files.tar.gz").write_text("")
    (cache_dir / "aur.db").symlink_to("aur.db.tar.gz")
    return cache_dir


def _sweeper(cache_dir, registry, git=None, dry_run=False) -> CacheSweeper:
    return CacheSweeper(cache_dir, "aur", registry, git or MagicMock(), dry_run=dry_run)


class TestCacheSweeper:
    """Tests for CacheSweeper."""

    def test_keep_set(self, cache, memory_registry) -> None:
        """Bases and file names of installed packages are kept."""
        keep = _sweeper(cache, memory_registry).keep_set()

        assert {"yay", "foo", "foo-git", "yay-12.3.0-1-x86_64.pkg.tar.zst"} <= keep

    def test_removes_unreferenced_entries(self, cache, memory_registry) -> None:
        """Stale mirrors and superseded files are deleted."""
        result = _sweeper(cache, memory_registry).sweep()

        assert result.removed == ["stale-base", "yay-11.0.0-1-x86_64.pkg.tar.zst"]
        assert not (cache / "stale-base").exists()
        assert not (cache / "yay-11.0.0-1-x86_64.pkg.tar.zst").exists()

    def test_keeps_archive_and_installed(self, cache, memory_registry) -> None:
        """Repository files and installed package files survive."""
        _sweeper(cache, memory_registry).sweep()

        assert (cache / "aur.db.tar.gz").exists()
        assert (cache / "aur.files.tar.gz").exists()
        assert (cache / "aur.db").is_symlink()
        assert (cache / "yay-12.3.0-1-x86_64.pkg.tar.zst").exists()
        assert (cache / "foo" / "PKGBUILD").exists()

    def test_cleans_kept_mirrors(self, cache, memory_registry) -> None:
        """Kept mirror directories get git clean, files do not."""
        git = MagicMock()

        result = _sweeper(cache, memory_registry, git=git).sweep()

        assert result.cleaned == ["foo", "yay"]
        cleaned = sorted(c.args[0].name for c in git.clean.call_args_list)
        assert cleaned == ["foo", "yay"]

    def test_second_sweep_removes_nothing(self, cache, memory_registry) -> None:
        """Sweeping twice is the same as sweeping once."""
        _sweeper(cache, memory_registry).sweep()

        result = _sweeper(cache, memory_registry).sweep()

        assert result.removed == []

    def test_dry_run_touches_nothing(self, cache, memory_registry) -> None:
        """In dry-run mode entries are reported but left alone."""
        git = MagicMock()

        result = _sweeper(cache, memory_registry, git=git, dry_run=True).sweep()

        assert result.dry_run is True
        assert "stale-base" in result.removed
        assert (cache / "stale-base").exists()
        git.clean.assert_not_called()

    def test_missing_cache_dir(self, tmp_path, memory_registry) -> None:
        """A cache that does not exist yet yields an empty result."""
        result = _sweeper(tmp_path / "nope", memory_registry).sweep()

        assert result.removed == []
        assert result.cleaned == []

    def test_delete_failure_raises(self, cache, memory_registry, monkeypatch) -> None:
        """An entry that cannot be deleted aborts the sweep."""

        def refuse(path):
            raise PermissionError("read-only")

        monkeypatch.setattr("aurctl.core.sweep._delete", refuse)

        with pytest.raises(AurctlError, match="Cannot delete"):
            _sweeper(cache, memory_registry).sweep()
