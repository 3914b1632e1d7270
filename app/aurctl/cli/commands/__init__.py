"""CLI commands for aurctl.

This package contains all subcommand implementations.
"""

from aurctl.cli.commands import clean, config, remove, search, sync, update

__all__ = ["clean", "config", "remove", "search", "sync", "update"]
