"""
Logging helpers.

The package logs under the "unfold" hierarchy. Importing the package never
prints anything: the root package logger only carries a NullHandler until
an application calls configure_logging().
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .config import get_config

ROOT_LOGGER_NAME = "unfold"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Safe to call repeatedly: the handler is installed once and only the
    level changes on later calls. Without an explicit level the
    UNFOLD_LOG_LEVEL environment setting is used.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(getattr(h, "_unfold_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._unfold_handler = True
        logger.addHandler(handler)

    if level is None:
        level = get_config().log_level_value
    elif isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    logger.propagate = False
    return logger
