# SPDX-License-Identifier: GPL-3.0-only
import logging

from fibcompare.interface.logging import LOG_FORMAT, LogLevel, setup_logging


def test_setup_logging_configures_app_logger() -> None:
    setup_logging(LogLevel.INFO)

    logger = logging.getLogger("fibcompare")
    assert logger.level == logging.INFO
    assert logging.getLogger("fibcompare.core.fib").getEffectiveLevel() == logging.INFO


def test_setup_logging_adds_single_handler() -> None:
    logger = logging.getLogger("fibcompare")
    propagate = logger.propagate
    logger.propagate = False
    try:
        setup_logging(LogLevel.DEBUG)
        setup_logging(LogLevel.DEBUG)

        assert len(logger.handlers) == 1
        formatter = logger.handlers[0].formatter
        assert formatter is not None
        assert formatter._fmt == LOG_FORMAT
    finally:
        logger.propagate = propagate
