"""Data models for aurctl.

This module exports the core data structures used throughout the application.
"""

from aurctl.models.package import (
    BuildUnit,
    InstalledPackage,
    ReconciledPackage,
    RegistryResponse,
    RemotePackage,
)

__all__ = [
    "BuildUnit",
    "InstalledPackage",
    "ReconciledPackage",
    "RegistryResponse",
    "RemotePackage",
]
