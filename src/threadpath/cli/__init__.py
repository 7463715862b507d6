"""Command-line interface for threadpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG and Fritzing input with selectable interpretation mode
- Any output format pyembroidery can write
- Verbose/quiet output modes
- Dry run mode for inspecting the stitch plan
"""

from threadpath.cli.app import cli, main

__all__ = ["cli", "main"]
