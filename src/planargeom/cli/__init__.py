"""Command-line interface for planargeom.

This module provides the CLI using Typer with rich output for
polygon and chain measurements.
"""

from planargeom.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
