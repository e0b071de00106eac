# SPDX-License-Identifier: GPL-3.0-only
import enum
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


class LogLevel(str, enum.Enum):
    """Valid log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def setup_logging(level: LogLevel) -> None:
    """Set up logging for the application root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("fibcompare")
    logger.setLevel(level.value)

    if not logger.hasHandlers():
        logger.addHandler(handler)
