"""CLI commands for timecard.

This package provides the command-line interface: recording entries,
managing projects and printing weekly reports.
"""

from timecard.cli.main import cli, main

__all__ = ["cli", "main"]
