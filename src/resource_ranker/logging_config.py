"""
Logging configuration for Resource Ranker.

Records go through a RichHandler on stderr so they never mix with a report
written to stdout. A run may add a plain-text file log on top.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "resource_ranker"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def level_for(verbose: bool = False, quiet: bool = False) -> int:
    """Quiet wins over verbose."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the ``resource_ranker`` logger for one CLI run.

    Handlers installed by an earlier call are closed and replaced, so a
    process that runs several commands (tests, embedding) never stacks
    duplicate handlers or keeps writing to an old log file.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging
        log_file: Optional file path; records are appended to it

    Returns:
        The configured ``resource_ranker`` logger
    """
    level = level_for(verbose=verbose, quiet=quiet)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    )

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.setLevel(level)
    # Our handlers already emit; the root logger would print records twice
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'resource_ranker.core')
              If None, returns the root resource_ranker logger
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
