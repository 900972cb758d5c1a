"""Logging for the equatable package.

As a library, equatable only emits through loggers below ``equatable``.
That logger carries a NullHandler so nothing is printed unless the host
application configures logging. Applications that want the package's own
console output (such as the bundled demo) call ``setup_logging``.
"""

import logging
import sys

from equatable.config import Settings

LIBRARY_LOGGER = "equatable"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


class _ConsoleHandler(logging.StreamHandler):
    """Marker type so setup_logging() can find the handler it installed."""


def setup_logging(settings: Settings) -> logging.Logger:
    """Send equatable's log records to stdout.

    The root logger is left alone. Calling this again replaces the
    previously installed console handler instead of adding another one.

    Args:
        settings: Library settings

    Returns:
        The package logger
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in [h for h in logger.handlers if isinstance(h, _ConsoleHandler)]:
        logger.removeHandler(handler)

    console = _ConsoleHandler(sys.stdout)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(console)
    logger.setLevel(level)

    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
