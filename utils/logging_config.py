"""
Configure simple logging for the selector tools.
"""

import logging
import os
import sys
from typing import Optional, Union

LOG_LEVEL_ENV = "SELECTOR_LOG_LEVEL"


def configure_logging(level: Optional[Union[int, str]] = None):
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger = logging.getLogger()
    logger.setLevel(level)
    ch = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    ch.setFormatter(formatter)
    logger.handlers = [ch]
