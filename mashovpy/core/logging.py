"""Logging utilities for mashovpy modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits from the root logger.

    Works with basicConfig() without an explicit setup_logging() call.
    When the root logger has no handlers yet, the logger falls back to
    WARNING so library debug output stays quiet by default.

    Args:
        name: Logger name (e.g. 'mashovpy.api')

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger
