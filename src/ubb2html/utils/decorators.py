#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/utils/decorators.py
"""Timing helpers for the parser entry points."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager for timing operations with DEBUG-level logging.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Parsing UBB code")

    Yields
    ------
    None
        Control flow to the code block being timed

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Parsing UBB code"):
        ...     html = parser.parse(text)
        ... # Logs: "Parsing UBB code completed in 0.01s" at DEBUG level

    Notes
    -----
    Time is only measured when the logger has DEBUG level enabled.

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start_time = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")


__all__ = ["debug_timer"]
