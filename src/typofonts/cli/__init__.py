"""Command-line interface for typofonts.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Table or JSON listing of every font in the given files
- Directory scanning with parallel workers
- Verbose/quiet output modes
- Strict mode for validating font collections
"""

from typofonts.cli.app import cli, main

__all__ = ["cli", "main"]
