"""
Logging setup shared by the API process.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Cache for loggers
_loggers = {}


def setup_logger(level: str = "INFO", name: str = "govinfo") -> logging.Logger:
    """
    Configure and return the application logger.

    Loggers are cached by name, so calling again only updates the level
    and never attaches a second handler. Raises ValueError for an unknown
    level name.
    """
    log_level = logging.getLevelName((level or "").strip().upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    if name in _loggers:
        logger = _loggers[name]
        logger.setLevel(log_level)
        return logger

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _loggers[name] = logger
    return logger
