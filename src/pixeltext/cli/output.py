"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library.
Rendered rows go to stdout; errors go to stderr.
"""

import json

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from pixeltext.domain import Canvas

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

# Unicode symbols for consistent visual language
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_canvas(canvas: Canvas, quiet: bool = False) -> None:
    """Print a rendered canvas, one row per line.

    Args:
        canvas: Canvas to print
        quiet: Skip the "output:" heading
    """
    if not quiet:
        console.print("\noutput:")
    for row in canvas.rows:
        console.out(row)


def print_canvas_json(canvas: Canvas) -> None:
    """Print a rendered canvas as JSON.

    Args:
        canvas: Canvas to print
    """
    console.out(json.dumps(canvas.to_dict()))


def print_supported_characters(chars: list[str], summary: str, quiet: bool = False) -> None:
    """Print the characters the font can render.

    Args:
        chars: Supported characters in display order
        summary: Human-readable summary of the character ranges
        quiet: Print only the characters
    """
    printable = Text("".join(ch for ch in chars if ch != " "))
    if quiet:
        console.print(printable, soft_wrap=True)
        return

    console.print(f"[bold]{len(chars)} supported characters[/bold] {SYM_DOT} {escape(summary)}")
    line = Text("  ")
    line.append(printable)
    console.print(line, soft_wrap=True)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}", soft_wrap=True)
    if details:
        err_console.print(Text(details), soft_wrap=True)
