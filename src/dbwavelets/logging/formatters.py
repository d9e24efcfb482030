"""Formatters aligning section indentation and multi-line messages."""

from __future__ import annotations

import logging

LEVEL_WIDTH = 8


class SectionFormatter(logging.Formatter):
    """Prefix-aware formatter.

    Every line of a message starts with the record indentation. Lines after
    the first are further shifted by the width of the prefix, so that they
    align with the first one.
    """

    def __init__(self, *, with_prefix: bool = True) -> None:
        """Instantiate the formatter.

        Args:
            with_prefix (bool, optional): Whether to start messages with
                the time and the level. Disable it when the handler already
                displays them. Defaults to True.
        """
        super().__init__()
        self._with_prefix = with_prefix

    def prefix(self, record: logging.LogRecord) -> str:
        """Time and level of a record, e.g. '[12:00:00] [INFO    ] '."""
        if not self._with_prefix:
            return ""
        timestamp = self.formatTime(record, "%H:%M:%S")
        return f"[{timestamp}] [{record.levelname:<{LEVEL_WIDTH}}] "

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record as text.

        Args:
            record (logging.LogRecord): Record.

        Returns:
            str: Text.
        """
        prefix = self.prefix(record)
        indent = getattr(record, "indent", "")
        first, *others = record.getMessage().split("\n")
        shift = indent + " " * len(prefix)
        return "\n".join([prefix + indent + first, *(shift + o for o in others)])
