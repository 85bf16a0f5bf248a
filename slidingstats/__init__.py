"""Incremental statistics over fixed-size sliding windows.

Each method keeps the last N samples of a stream and updates its statistic
as every new sample arrives, without recomputing from the whole window.

Example:
    import slidingstats

    median = slidingstats.SMM(5, first_price)
    lsma = slidingstats.LinReg(5, first_price)
    for price in prices:
        print(median.next(price), lsma.next(price))

Logging is silent by default; see ``enable_console_logging`` and
``configure_from_env``.
"""

import logging

from slidingstats.config import Settings, get_settings, reset_settings
from slidingstats.errors import InvalidInput, InvalidParameters, SlidingStatsError
from slidingstats.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
)
from slidingstats.methods import LSMA, SMM, LinReg, Method
from slidingstats.window import Window

logging.getLogger("slidingstats").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "InvalidInput",
    "InvalidParameters",
    "LSMA",
    "LinReg",
    "Method",
    "SMM",
    "Settings",
    "SlidingStatsError",
    "Window",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "get_settings",
    "reset_settings",
    "set_level",
]
