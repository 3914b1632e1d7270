"""Installed-package registries.

This module exports the registry interface and its pacman implementation.
"""

from aurctl.database.base import InstalledRegistry
from aurctl.database.syncdb import SyncDatabase

__all__ = ["InstalledRegistry", "SyncDatabase"]
