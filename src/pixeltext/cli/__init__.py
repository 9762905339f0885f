"""Command-line interface for pixeltext.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render text given as an argument or typed at a prompt
- JSON output for scripting
- Listing of the characters the font supports
- Error messages naming the offending character or length
"""

from pixeltext.cli.app import cli, main

__all__ = ["cli", "main"]
