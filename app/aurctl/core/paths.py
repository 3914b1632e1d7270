"""XDG-compliant path management for aurctl.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and the package cache.

XDG defaults:
- Config: ~/.config/aurctl/
- Cache: ~/.cache/<repo>/ (one mirror per package base plus the repository archive)
"""

import os
from pathlib import Path

from aurctl.core.errors import AurctlError

# Application identifier for directory naming
APP_NAME = "aurctl"

# Default name of the local pacman repository
DEFAULT_REPO_NAME = "aur"


def _get_xdg_base(env_var: str, default_subdir: str) -> Path:
    """Get an XDG base directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the XDG base directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base)
    return Path.home() / default_subdir


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/aurctl/ (or XDG_CONFIG_HOME/aurctl/).
    """
    return _get_xdg_base("XDG_CONFIG_HOME", ".config") / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/aurctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_cache_dir(repo_name: str = DEFAULT_REPO_NAME) -> Path:
    """Get the package cache directory path.

    The cache holds one git mirror per package base, the built package
    files and the local repository archive. It is named after the
    repository so that pacman can serve it directly.

    Args:
        repo_name: Name of the local pacman repository.

    Returns:
        Path to ~/.cache/<repo_name>/ (or XDG_CACHE_HOME/<repo_name>/).
    """
    return _get_xdg_base("XDG_CACHE_HOME", ".cache") / repo_name


def get_archive_path(cache_dir: Path, repo_name: str = DEFAULT_REPO_NAME) -> Path:
    """Get the local repository archive path inside the cache.

    Args:
        cache_dir: The package cache directory.
        repo_name: Name of the local pacman repository.

    Returns:
        Path to <cache_dir>/<repo_name>.db.tar.gz.
    """
    return cache_dir / f"{repo_name}.db.tar.gz"


def ensure_cache_dir(path: Path) -> Path:
    """Create the package cache directory if it doesn't exist.

    Args:
        path: Cache directory to create.

    Returns:
        Path to the cache directory.

    Raises:
        AurctlError: If the directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create cache directory {path}: Permission denied"
        raise AurctlError(msg) from e
    except OSError as e:
        msg = f"Cannot create cache directory {path}: {e}"
        raise AurctlError(msg) from e
    return path
