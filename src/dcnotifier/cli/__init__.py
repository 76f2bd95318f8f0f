"""Command line interface for dcnotifier."""

from .main import cli

__all__ = ["cli"]
