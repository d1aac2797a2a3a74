"""
Logging configuration for the service.

One stdout handler on the root logger; chatty libraries are silenced
unless debug is on.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"

NOISY_LOGGERS = ("httpx", "httpcore", "multipart", "python_multipart")


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name used when debug is off
        debug: Whether to enable debug logging
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if debug else level.upper())

    if not debug:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
