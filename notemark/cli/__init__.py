"""Command line interface for notemark."""
