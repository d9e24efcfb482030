"""Logger class."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from typing_extensions import ParamSpec

from dbwavelets.logging._levels import DETAIL
from dbwavelets.logging.sections import close_section, open_section
from dbwavelets.logging.utils import sec2text

if TYPE_CHECKING:
    from collections.abc import Generator

P = ParamSpec("P")


class Logger(logging.Logger):
    """Logger with a .detail method, timers and indented sections."""

    def detail(self, msg: object, *args: P.args, **kwargs: P.kwargs) -> None:
        """Log a message at DETAIL level.

        Args:
            msg (object): Message.
            *args (P.args): Arguments.
            **kwargs (P.kwargs): Keyword arguments.
        """
        if self.isEnabledFor(DETAIL):
            self._log(DETAIL, msg, args, **kwargs)

    @contextmanager
    def timeit(self, message: str) -> Generator[None, None, None]:
        """Log the wall time spent within the context.

        Args:
            message (str): Name of the timed step.

        Yields:
            Generator[None, None, None]: Context manager.
        """
        self.detail(f"{message}...")
        start = time.perf_counter()
        yield
        self.detail(f"{message} done in {sec2text(time.perf_counter() - start)}")

    @contextmanager
    def section(self, title: str) -> Generator[None, None, None]:
        """Indent every message logged within the context.

        Args:
            title (str): Message opening the section, not indented.

        Yields:
            Generator[None, None, None]: Context manager.
        """
        self.detail(title)
        token = open_section()
        try:
            yield
        finally:
            close_section(token)
