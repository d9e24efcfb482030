"""Logging levels."""

import logging

DETAIL = 15

VERBOSE_LEVELS = (logging.WARNING, logging.INFO, DETAIL, logging.DEBUG)


def from_verbose(verbose_level: int) -> int:
    """Convert a verbose count into a logging level.

    Counts above 3 are treated as 3.

    Args:
        verbose_level (int): Number of -v flags.

    Returns:
        int: Logging level.
    """
    return VERBOSE_LEVELS[min(max(verbose_level, 0), len(VERBOSE_LEVELS) - 1)]
