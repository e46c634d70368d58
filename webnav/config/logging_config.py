"""
Logging setup for the command line entry point.

Library modules only create loggers; nothing is configured until
configure_logging() is called.
"""

import logging
import sys

from webnav.config.constants import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level=None):
    """Send webnav log records to stderr at the given (or configured) level."""
    level = (level or LOG_LEVEL).upper()
    logger = logging.getLogger("webnav")
    logger.setLevel(getattr(logging, level, logging.WARNING))

    if not any(getattr(h, "_webnav", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._webnav = True
        logger.addHandler(handler)
    return logger
