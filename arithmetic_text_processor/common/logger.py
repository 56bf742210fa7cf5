"""Project-wide logger."""
import logging
import os
from typing import Optional, Union


LOGGER_NAME = "arithmetic_text_processor"
LOG_LEVEL_ENV = "ARITHMETIC_TEXT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LEVEL = logging.WARNING


def _is_project_handler(handler: logging.Handler) -> bool:
    return (
        isinstance(handler, logging.StreamHandler)
        and handler.formatter is not None
        and handler.formatter._fmt == LOG_FORMAT
    )


def level_from_env(value: Optional[str] = None) -> int:
    """
    Resolve the level named by ``ARITHMETIC_TEXT_LOG_LEVEL``.

    Unknown names fall back to WARNING instead of failing at import time.

    :param value: Level name, read from the environment when omitted

    :return: Numeric logging level
    :rtype: int
    """
    if value is None:
        value = os.environ.get(LOG_LEVEL_ENV, "")
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LEVEL


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Return the project logger, attaching its stream handler on first use.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)
    if not any(_is_project_handler(h) for h in log.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
        log.propagate = False
    return log


def set_log_level(level: Union[int, str]) -> None:
    """
    Change the level of the project logger.

    :param level: Level name (e.g. "DEBUG") or numeric level
    :raises ValueError: If the level name is unknown
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)


logger = get_logger()
logger.setLevel(level_from_env())
