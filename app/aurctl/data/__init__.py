"""Bundled data files for aurctl."""
