"""Section depth and the records carrying it."""

from __future__ import annotations

import logging
from contextvars import ContextVar

INDENT_STEP = "    "

_depth: ContextVar[int] = ContextVar("_depth", default=0)


def current_indent() -> str:
    """Indentation of the innermost open section."""
    return INDENT_STEP * _depth.get()


def open_section() -> object:
    """Increase the section depth.

    Returns:
        object: Token to give back to `close_section`.
    """
    return _depth.set(_depth.get() + 1)


def close_section(token: object) -> None:
    """Restore the section depth preceding `open_section`."""
    _depth.reset(token)


class SectionRecord(logging.LogRecord):
    """Record remembering the section it was emitted in."""

    def __init__(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003
        super().__init__(*args, **kwargs)
        self.indent = current_indent()
