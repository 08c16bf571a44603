"""
Logging configuration for Coding Police.

stdout carries results only: the hook echoes the tool output (with any
violation report appended) and ``check`` prints its formatted reports. An
editing pipeline reads that stream back verbatim, so diagnostics never go
there. They go to stderr through a rich handler, and optionally to a plain
log file.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "coding_police"


def log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level; ``quiet`` wins."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def stderr_handler(verbose: bool = False) -> RichHandler:
    """Rich handler bound to a stderr console.

    Markup is off because messages quote paths and source text verbatim.
    Timestamps and call sites are shown only when debugging.
    """
    return RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route package logging to stderr (and optionally a file).

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging
        log_file: Optional file path to append logs to

    Returns:
        The ``coding_police`` logger
    """
    level = log_level(verbose=verbose, quiet=quiet)

    handlers: list[logging.Handler] = [stderr_handler(verbose)]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger
