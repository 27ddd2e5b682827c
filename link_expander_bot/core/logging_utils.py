"""Logging helpers that keep configuration consistent across modules."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "link_expander_bot"


def configure_library_logging(
    *,
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    handlers: Optional[Iterable[logging.Handler]] = None,
) -> logging.Logger:
    """Return the package logger configured with the common format.

    ``level`` accepts either a numeric level or a name such as ``"DEBUG"``
    (the form ``LOG_LEVEL`` arrives in from the environment).
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    if handlers:
        for handler in handlers:
            handler.setFormatter(logging.Formatter(fmt))
            logger.addHandler(handler)
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    logger.propagate = False
    return logger


__all__ = ["configure_library_logging", "ROOT_LOGGER_NAME"]
