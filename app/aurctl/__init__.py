"""aurctl - keep a local pacman repository of AUR packages up to date."""

__version__ = "0.1.0"
