"""Logging setup shared by the experiment runners and the CLI.

The DP engines only ever call ``get_logger(__name__)``; nothing is printed
unless ``setup_logging`` has attached a handler to the root logger. The level
comes from the ``level`` argument, then the ``LOG_LEVEL`` environment
variable, then ``WARNING``.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler = None


def setup_logging(level=None, stream=None):
    global _handler
    level = level or os.getenv("LOG_LEVEL", "WARNING")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # calling twice replaces our handler instead of stacking a second one
    if _handler is not None:
        root_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(_handler)
    return _handler


def get_logger(name):
    return logging.getLogger(name)


def reset_logging():
    global _handler
    if _handler is not None:
        logging.getLogger().removeHandler(_handler)
        _handler = None
    logging.getLogger().setLevel(logging.WARNING)
