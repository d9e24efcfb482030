"""Package logging: DETAIL level, indented sections and timers.

Messages logged within `Logger.section` are indented by one step per open
section, whichever handler ends up displaying them.
"""

from dbwavelets.logging._levels import DETAIL
from dbwavelets.logging.logger import Logger
from dbwavelets.logging.root import getLogger, setup_root_logger

__all__ = ["DETAIL", "Logger", "getLogger", "setup_root_logger"]
