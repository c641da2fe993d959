"""Command-line interface for greatcircle.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Single-shot bearing, distance and interpolation commands
- Line, path and polygon intersection searches
- Verbose output with search statistics
"""

from greatcircle.cli.app import cli, main

__all__ = ["cli", "main"]
