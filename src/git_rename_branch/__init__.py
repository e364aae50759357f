"""Rename the current git branch and optionally sync the rename to a remote."""

__version__ = "0.1.0"
