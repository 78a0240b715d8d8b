"""Manage dotfile symlinks between a source directory and the home directory."""

__version__ = "0.1.0"
