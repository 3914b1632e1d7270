"""Wrappers around the external tools aurctl drives.

This module exports the git, makepkg, repo-add and editor wrappers.
"""

from aurctl.tools.editor import Editor
from aurctl.tools.git import Git
from aurctl.tools.makepkg import Makepkg, parse_package_filename
from aurctl.tools.repo import RepoArchive

__all__ = ["Editor", "Git", "Makepkg", "RepoArchive", "parse_package_filename"]
