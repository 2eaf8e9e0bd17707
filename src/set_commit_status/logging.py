"""Loguru setup for the status client and CLI.

The retry messages ("Retrying after N seconds!", rate limit warnings) are
the main output of a run, so the console sink prints them on one short
line. httpx request logs are folded into the same sink but held back to
WARNING unless debugging.
"""

from __future__ import annotations

import inspect
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger, Record

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

HTTP_LOGGERS = ("httpx", "httpcore")

CONSOLE_FORMAT = (
    "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | "
    "<cyan>{source}</cyan> - <level>{message}</level>\n{exception}"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {source}:{line} | {extra} | {message}\n"
)


class InterceptHandler(logging.Handler):
    """Forward stdlib records (httpx, httpcore) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Report the caller of the stdlib logger, not this handler
        frame, depth = inspect.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _formatter(template: str) -> Callable[[Record], str]:
    # Package modules bind "name"; intercepted stdlib records fall back to the module
    def format_record(record: Record) -> str:
        source = "{extra[name]}" if "name" in record["extra"] else "{name}"
        return template.replace("{source}", source)

    return format_record


def _effective_level(level: LogLevel, verbose: bool, quiet: bool) -> LogLevel:
    if verbose:
        return "DEBUG"
    if quiet:
        return "WARNING"
    return level


def setup_logging(
    level: LogLevel = "INFO",
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    serialize: bool = False,
) -> None:
    """Replace all loguru sinks with the CLI's console (and optional file) sinks.

    Args:
        level: Base log level from settings
        verbose: Force DEBUG; wins over quiet
        quiet: Force WARNING so only rate limit warnings and errors show
        log_file: Optional rotating log file, always written at DEBUG
        rotation: When to rotate the log file (e.g. "10 MB", "1 day")
        retention: How long rotated files are kept
        serialize: Write the log file as JSON lines
    """
    console_level = _effective_level(level, verbose, quiet)

    logger.remove()
    logger.add(
        sys.stderr,
        level=console_level,
        format=_formatter(CONSOLE_FORMAT),
        colorize=True,
        diagnose=False,
    )
    if log_file is not None:
        logger.add(
            log_file,
            level="DEBUG",
            format=_formatter(FILE_FORMAT),
            rotation=rotation,
            retention=retention,
            compression="gz",
            serialize=serialize,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    http_level = logging.DEBUG if console_level in ("TRACE", "DEBUG") else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


def get_logger(name: str) -> Logger:
    """Return the shared loguru logger with ``name`` bound, e.g. ``get_logger(__name__)``."""
    return logger.bind(name=name)


def bind_commit(owner: str, repo: str, sha: str) -> Logger:
    """Logger carrying the target commit as ``repo`` and ``sha`` extras."""
    return logger.bind(name="status", repo=f"{owner}/{repo}", sha=sha)


def reset_logging() -> None:
    """Drop every sink; tests call this to isolate loguru state."""
    logger.remove()
