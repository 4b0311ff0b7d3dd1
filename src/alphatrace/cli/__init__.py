"""Command-line interface for alphatrace.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Image and tracing statistics
- Verbose/quiet output modes
- SVG or JSON output
- One status line per failure kind
"""

from alphatrace.cli.app import cli, main

__all__ = ["cli", "main"]
