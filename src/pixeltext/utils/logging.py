"""Logging utilities for pixeltext."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

HANDLER_NAME = "pixeltext"


@dataclass
class RenderStats:
    """Statistics from a run of renders."""

    rendered_count: int = 0
    rejected_count: int = 0
    characters_rendered: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate time between the first start and the last finish."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console output goes to stderr so it never mixes with rendered rows on
    stdout. Handlers installed by a previous call are replaced.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pixeltext")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking renders and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()
        self._started: float | None = None

    def log_render_start(self, text: str) -> None:
        """Log start of a render."""
        self._started = time.perf_counter()
        if self._stats.start_time is None:
            self._stats.start_time = time.time()
        self._logger.debug("Rendering text", length=len(text))

    def log_render_complete(self, text: str, width: int, height: int) -> None:
        """Log successful render."""
        self._logger.info(
            "Text rendered",
            length=len(text),
            width=width,
            height=height,
            duration_ms=round(self._elapsed_ms(), 3),
        )
        self._stats.rendered_count += 1
        self._stats.characters_rendered += len(text)
        self._stats.end_time = time.time()

    def log_render_rejected(self, text: str, error: Exception) -> None:
        """Log a render that failed validation."""
        self._logger.info(
            "Render rejected",
            length=len(text),
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.rejected_count += 1
        self._stats.errors.append((type(error).__name__, str(error)))
        self._stats.end_time = time.time()

    def _elapsed_ms(self) -> float:
        if self._started is None:
            return 0.0
        return (time.perf_counter() - self._started) * 1000

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
