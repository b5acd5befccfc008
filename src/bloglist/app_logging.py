"""Logging configuration helpers."""

import logging

LOGGER_NAME = "bloglist"
_FORMAT = "%(asctime)s %(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Repeated calls only adjust the level, so building several apps in one
    process never duplicates output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_parse_level(level))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def _parse_level(level: str) -> int:
    resolved = logging.getLevelName((level or "INFO").strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved
