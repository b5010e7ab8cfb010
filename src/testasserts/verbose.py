"""Logging configuration for debug output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "testasserts",
) -> logging.Logger:
    """
    Configure and return a logger for debug output.

    Writes to debug_file when one is given. Optionally also writes to stderr
    if verbose=True.

    Args:
        debug_file: Path to debug log file, or None for no file output
        verbose: If True, also log to stderr.
        logger_name: Name of the logger instance. Library modules log to
            children of "testasserts".

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Clear any existing handlers for this specific logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    # Create formatter with timestamp
    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    # Add file handler only if a debug file was given
    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode='a')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Add stderr handler only if verbose mode enabled
    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger
