"""CLI application entry point for pixeltext.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from pixeltext import __version__
from pixeltext.cli.output import (
    console,
    print_canvas,
    print_canvas_json,
    print_error,
    print_supported_characters,
)
from pixeltext.config import (
    LayoutConfig,
    LoggingConfig,
    MissingGlyphPolicy,
    PixelTextSettings,
)
from pixeltext.core import LayoutEngine
from pixeltext.exceptions import TextTooLongError, UnsupportedCharacterError
from pixeltext.font import Charset
from pixeltext.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="pixeltext",
    help="Render text as 0/1 pixel art using a built-in 5-row font.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]pixeltext[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    text: Annotated[
        str | None,
        typer.Argument(
            help="Text to render (prompted for when omitted)",
            show_default=False,
        ),
    ] = None,
    charset: Annotated[
        str,
        typer.Option(
            "--charset",
            "-c",
            help="Character set (basic|extended)",
        ),
    ] = "extended",
    lossy: Annotated[
        bool,
        typer.Option(
            "--lossy",
            help="Draw unsupported characters as blank space instead of failing",
        ),
    ] = False,
    max_length: Annotated[
        int,
        typer.Option(
            "--max-length",
            help="Maximum text length in UTF-8 bytes",
            min=1,
        ),
    ] = 1000,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the canvas as a JSON object",
        ),
    ] = False,
    list_chars: Annotated[
        bool,
        typer.Option(
            "--list-chars",
            help="List supported characters and exit",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print canvas rows only",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render text as a grid of 0/1 pixels.

    Each character is drawn 5 pixels tall with its own width, one blank
    column apart, inside a one-pixel blank border.

    Example:
        pixeltext "Hello World"
    """
    # Validate charset argument
    try:
        charset_choice = Charset(charset.lower())
    except ValueError:
        print_error(
            f"Invalid charset: {charset}",
            details="Valid values: basic, extended",
        )
        raise typer.Exit(code=1)

    try:
        settings = PixelTextSettings(
            layout=LayoutConfig(
                max_text_length=max_length,
                missing_glyph=MissingGlyphPolicy.LOSSY if lossy else MissingGlyphPolicy.STRICT,
                charset=charset_choice,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level,
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    engine = LayoutEngine(config=settings.layout)

    if list_chars:
        print_supported_characters(
            engine.table.sorted_characters(),
            summary=engine.table.describe(),
            quiet=quiet,
        )
        raise typer.Exit(code=0)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    except (OSError, AttributeError) as e:
        print_error(f"Could not configure logging: {e}")
        raise typer.Exit(code=1)

    render_logger = RenderLogger(logger)

    if text is None:
        text = typer.prompt("Enter your text input", default="", show_default=False)
    text = text.strip()

    render_logger.log_render_start(text)
    try:
        canvas = engine.render(text)
    except UnsupportedCharacterError as e:
        render_logger.log_render_rejected(text, e)
        print_error(
            f"Character '{e.character}' is not supported by the font.",
            details=f"Supported characters: {engine.table.describe()}",
        )
        raise typer.Exit(code=1)
    except TextTooLongError as e:
        render_logger.log_render_rejected(text, e)
        print_error(
            f"Text is too long ({e.length} characters). "
            f"Maximum length is {e.limit} characters."
        )
        raise typer.Exit(code=1)

    render_logger.log_render_complete(text, canvas.width, canvas.height)

    if as_json:
        print_canvas_json(canvas)
    else:
        print_canvas(canvas, quiet=quiet)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
