"""Package models for registry metadata and reconciliation.

This module defines the data structures passed between the registry
client, the reconciliation engine and the build-unit orchestrator.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class RemotePackage(BaseModel):
    """A package record as published by the AUR RPC interface.

    Immutable once parsed. Field aliases match the RPC JSON keys.

    Attributes:
        name: Package name.
        description: One-line description.
        maintainer: Maintainer account, None when the package is orphaned.
        num_votes: Number of user votes.
        popularity: Decaying popularity score.
        out_of_date: Unix timestamp of the out-of-date flag, None or 0 when not flagged.
        package_base: Package base (the build unit owning this package).
        version: Latest published version (epoch:pkgver-pkgrel).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: Annotated[str, Field(alias="Name", min_length=1)]
    description: Annotated[str | None, Field(alias="Description")] = None
    maintainer: Annotated[str | None, Field(alias="Maintainer")] = None
    num_votes: Annotated[int, Field(alias="NumVotes")] = 0
    popularity: Annotated[float, Field(alias="Popularity")] = 0.0
    out_of_date: Annotated[int | None, Field(alias="OutOfDate")] = None
    package_base: Annotated[str, Field(alias="PackageBase", min_length=1)]
    version: Annotated[str, Field(alias="Version")]

    @property
    def is_orphan(self) -> bool:
        """Check if the package has no maintainer."""
        return not self.maintainer

    @property
    def is_flagged(self) -> bool:
        """Check if the package is flagged out of date."""
        return bool(self.out_of_date)

    @property
    def flagged_on(self) -> date | None:
        """Local date on which the package was flagged out of date."""
        if not self.out_of_date:
            return None
        return datetime.fromtimestamp(self.out_of_date).date()


class RegistryResponse(BaseModel):
    """Envelope returned by every RPC endpoint."""

    model_config = ConfigDict(extra="ignore")

    resultcount: int = 0
    results: list[RemotePackage] = Field(default_factory=list)
    type: str | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class InstalledPackage:
    """A package present in the local repository database.

    Attributes:
        name: Package name.
        version: Installed version string.
        base: Package base the package was built from.
        filename: Exact file name of the package archive.
    """

    name: str
    version: str
    base: str
    filename: str

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ReconciledPackage:
    """A remote record matched against the locally installed version.

    Attributes:
        remote: The registry record.
        version: Candidate version; the published one, or the version
            computed from sources for development packages.
        local_version: Installed version, empty if not installed.
    """

    remote: RemotePackage
    version: str
    local_version: str = ""

    @property
    def name(self) -> str:
        """Package name."""
        return self.remote.name

    @property
    def base(self) -> str:
        """Package base (build unit)."""
        return self.remote.package_base

    @property
    def is_installed(self) -> bool:
        """Check if some version of the package is installed."""
        return bool(self.local_version)


@dataclass(frozen=True, slots=True)
class BuildUnit:
    """A package base and the outdated packages it emits.

    The orchestrator clones, reviews and builds a unit exactly once,
    whatever the number of its packages.

    Attributes:
        base: Package base name; also the mirror directory name.
        packages: Names of the outdated packages belonging to the base.
    """

    base: str
    packages: tuple[str, ...] = field(default_factory=tuple)
