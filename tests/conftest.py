"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterator
from typing import Any

import pytest
from aurctl.core.config import AurctlConfig
from aurctl.database.base import InstalledRegistry
from aurctl.models.package import InstalledPackage, RemotePackage


def _vercmp_key(version: str) -> tuple[int, ...]:
    """Crude numeric ordering, enough for test versions like '1.2-1'."""
    return tuple(int(part) for part in version.replace("-", ".").split(".") if part.isdigit())


class MemoryRegistry(InstalledRegistry):
    """In-memory installed registry for tests."""

    def __init__(self, packages: list[InstalledPackage] | None = None) -> None:
        self._packages = list(packages or [])
        self.compared: list[tuple[str, str]] = []

    def packages(self) -> Iterator[InstalledPackage]:
        yield from self._packages

    def compare(self, a: str, b: str) -> int:
        self.compared.append((a, b))
        ka, kb = _vercmp_key(a), _vercmp_key(b)
        return (ka > kb) - (ka < kb)


def make_remote(name: str, version: str = "1.0-1", **fields: Any) -> RemotePackage:
    """Build a RemotePackage with sensible defaults."""
    data: dict[str, Any] = {
        "Name": name,
        "Version": version,
        "PackageBase": fields.pop("base", name),
        "Description": f"{name} description",
        "Maintainer": "someone",
        "NumVotes": 10,
        "Popularity": 1.0,
        "OutOfDate": None,
    }
    data.update(fields)
    return RemotePackage.model_validate(data)


def make_installed(name: str, version: str = "1.0-1", base: str | None = None) -> InstalledPackage:
    """Build an InstalledPackage with a matching file name."""
    return InstalledPackage(
        name=name,
        version=version,
        base=base or name,
        filename=f"{name}-{version}-x86_64.pkg.tar.zst",
    )


@pytest.fixture
def memory_registry() -> MemoryRegistry:
    """Registry with two installed packages, one of them split from a shared base."""
    return MemoryRegistry(
        [
            make_installed("yay", "12.3.0-1"),
            make_installed("python-foo", "2.0-1", base="foo"),
            make_installed("foo-git", "r10.abc-1"),
        ]
    )


@pytest.fixture
def config(tmp_path) -> AurctlConfig:
    """Configuration pointing every directory into tmp_path."""
    return AurctlConfig(
        cache_dir=tmp_path / "cache",
        build_dir=tmp_path / "build",
        sync_db_dir=tmp_path / "sync",
        editor="vim",
    )


@pytest.fixture
def info_payload() -> dict[str, Any]:
    """Sample RPC info response."""
    return {
        "version": 5,
        "type": "multiinfo",
        "resultcount": 2,
        "results": [
            {
                "Name": "yay",
                "Description": "Yet another yogurt",
                "Maintainer": "jguer",
                "NumVotes": 2500,
                "Popularity": 30.5,
                "OutOfDate": None,
                "PackageBase": "yay",
                "Version": "12.4.2-1",
                "URL": "https://github.com/Jguer/yay",
            },
            {
                "Name": "python-foo",
                "Description": "Foo bindings",
                "Maintainer": None,
                "NumVotes": 3,
                "Popularity": 0.01,
                "OutOfDate": 1700000000,
                "PackageBase": "foo",
                "Version": "2.1-1",
            },
        ],
    }


@pytest.fixture
def remote():
    """Factory for RemotePackage records."""
    return make_remote


@pytest.fixture
def installed():
    """Factory for InstalledPackage entries."""
    return make_installed


@pytest.fixture
def registry_factory():
    """Factory for in-memory installed registries."""
    return MemoryRegistry
