"""Command modules for the notemark CLI."""

from notemark.cli.commands import plain, render, search

__all__ = ["plain", "render", "search"]
