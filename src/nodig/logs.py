"""Logging setup for the nodig package logger

Modules log through ``logging.getLogger(__name__)``; the CLI calls
``configure_logging`` once with the configured level.
"""

import logging
import sys


LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stderr handler to the 'nodig' logger and stop propagation to root; repeat calls only update the level."""
    logger = logging.getLogger("nodig")
    logger.setLevel(level.upper())
    logger.propagate = False
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
