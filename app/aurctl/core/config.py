"""Configuration and per-run options.

Two layers of settings exist:

- AurctlConfig: persistent settings read from ~/.config/aurctl/config.toml
  (repository name, AUR endpoints, directories, editor, devel suffixes).
- RunOptions: the flags of a single invocation (--force, --devel, --noedit,
  --noconfirm).

Both are built once at startup and are immutable afterwards; they are passed
explicitly to the reconciliation engine and the orchestrator.
"""

import logging
import os
import tempfile
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from aurctl.core.errors import ConfigError
from aurctl.core.paths import DEFAULT_REPO_NAME, get_archive_path, get_cache_dir, get_config_path

logger = logging.getLogger(__name__)


class AurctlConfig(BaseModel):
    """Persistent aurctl configuration.

    Attributes:
        repo_name: Name of the local pacman repository (and of the cache directory).
        aur_url: Base URL of the AUR web interface, used for git clones.
        rpc_url: RPC endpoint. If None, derived from aur_url.
        sync_db_dir: Directory holding pacman's sync databases.
        cache_dir: Package cache. If None, uses ~/.cache/<repo_name>.
        build_dir: makepkg BUILDDIR. If None, uses the system temp directory.
        editor: Command used to review PKGBUILDs. If None, uses $VISUAL/$EDITOR/vim.
        devel_suffixes: Name suffixes marking development (VCS) packages.
        timeout_seconds: HTTP timeout for registry requests.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    repo_name: Annotated[
        str,
        Field(min_length=1, description="Local pacman repository name"),
    ] = DEFAULT_REPO_NAME
    aur_url: Annotated[
        str,
        Field(description="AUR base URL"),
    ] = "https://aur.archlinux.org"
    rpc_url: Annotated[
        str | None,
        Field(description="AUR RPC endpoint (None = <aur_url>/rpc/v5)"),
    ] = None
    sync_db_dir: Annotated[
        Path,
        Field(description="pacman sync database directory"),
    ] = Path("/var/lib/pacman/sync")
    cache_dir: Annotated[
        Path | None,
        Field(description="Package cache directory (None = XDG cache)"),
    ] = None
    build_dir: Annotated[
        Path | None,
        Field(description="makepkg build directory (None = temp dir)"),
    ] = None
    editor: Annotated[
        str | None,
        Field(description="PKGBUILD editor command"),
    ] = None
    devel_suffixes: Annotated[
        tuple[str, ...],
        Field(description="Suffixes of development packages"),
    ] = ("-git",)
    timeout_seconds: Annotated[
        float,
        Field(gt=0, le=600, description="Registry request timeout in seconds"),
    ] = 30.0

    @property
    def effective_rpc_url(self) -> str:
        """RPC endpoint, derived from aur_url when not set explicitly."""
        if self.rpc_url:
            return self.rpc_url.rstrip("/")
        return f"{self.aur_url.rstrip('/')}/rpc/v5"

    @property
    def effective_cache_dir(self) -> Path:
        """Package cache directory."""
        if self.cache_dir is not None:
            return self.cache_dir.expanduser()
        return get_cache_dir(self.repo_name)

    @property
    def effective_build_dir(self) -> Path:
        """makepkg BUILDDIR."""
        if self.build_dir is not None:
            return self.build_dir.expanduser()
        return Path(tempfile.gettempdir())

    @property
    def effective_editor(self) -> str:
        """Editor command line."""
        return self.editor or os.environ.get("VISUAL") or os.environ.get("EDITOR") or "vim"

    @property
    def archive_path(self) -> Path:
        """Local repository archive inside the cache."""
        return get_archive_path(self.effective_cache_dir, self.repo_name)

    @property
    def sync_db_path(self) -> Path:
        """pacman's synced copy of the local repository."""
        return self.sync_db_dir / f"{self.repo_name}.db"

    def clone_url(self, base: str) -> str:
        """Git URL of a package base."""
        return f"{self.aur_url.rstrip('/')}/{base}.git"

    def is_devel(self, name: str) -> bool:
        """Check if a package name carries a development suffix."""
        return name.endswith(self.devel_suffixes)


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Flags of a single invocation.

    Attributes:
        force: Treat every requested package as outdated.
        devel: Resolve development package versions from their sources.
        noedit: Never offer to edit PKGBUILDs.
        noconfirm: Answer every confirmation with yes.
    """

    force: bool = False
    devel: bool = False
    noedit: bool = False
    noconfirm: bool = False


def load_config(path: Path | None = None) -> AurctlConfig:
    """Load configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated AurctlConfig object.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return AurctlConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return AurctlConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: AurctlConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The AurctlConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: AurctlConfig) -> dict[str, object]:
    """Convert AurctlConfig to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are left out.
    """
    return config.model_dump(mode="json", exclude_none=True)
