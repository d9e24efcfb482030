"""Root logger configuration."""

from __future__ import annotations

import logging
import sys

try:
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.theme import Theme

    WITH_RICH = True
except ImportError:
    WITH_RICH = False

from dbwavelets.logging._levels import DETAIL, from_verbose
from dbwavelets.logging.environments import in_batch_job, in_notebook
from dbwavelets.logging.formatters import SectionFormatter
from dbwavelets.logging.logger import Logger
from dbwavelets.logging.sections import SectionRecord

LEVEL_COLORS = {
    "detail": "cyan",
    "info": "blue",
    "debug": "dim",
    "warning": "yellow",
    "error": "red",
    "critical": "bold red",
}


def setup_root_logger(verbose_level: int = 1) -> None:
    """Configure the root logger.

    Rich output is used unless rich is missing or the code runs in a batch
    job, whose logs are plain files.

    Args:
        verbose_level (int, optional): 0: WARNING, 1: INFO, 2: DETAIL,
            3: DEBUG. Defaults to 1.
    """
    logging.setLoggerClass(Logger)
    logging.setLogRecordFactory(SectionRecord)
    logging.addLevelName(DETAIL, "DETAIL")
    level = from_verbose(verbose_level)
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    use_rich = WITH_RICH and not in_batch_job()
    handler = make_rich_handler() if use_rich else make_stream_handler()
    handler.setLevel(level)
    root.addHandler(handler)

    if not in_notebook():
        sys.stdout.reconfigure(line_buffering=True)
        sys.stderr.reconfigure(line_buffering=True)


def make_rich_handler() -> RichHandler:
    """Handler printing colored levels and times with rich.

    Returns:
        RichHandler: Handler.
    """
    theme = Theme({f"logging.level.{k}": v for k, v in LEVEL_COLORS.items()})
    handler = RichHandler(
        console=Console(theme=theme, force_jupyter=False),
        rich_tracebacks=False,
        show_time=True,
        show_path=False,
        markup=False,
        show_level=True,
        log_time_format="[%H:%M:%S]",
    )
    handler.setFormatter(SectionFormatter(with_prefix=False))
    return handler


def make_stream_handler() -> logging.StreamHandler:
    """Plain text handler writing to stderr.

    Returns:
        logging.StreamHandler: Handler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(SectionFormatter())
    return handler


def getLogger(name: str | None = None) -> Logger:  # noqa: N802
    """Wrapper for logging.getLogger.

    Args:
        name (str | None, optional): Logger name. Defaults to None.

    Returns:
        Logger: Logger.
    """
    return logging.getLogger(name)
