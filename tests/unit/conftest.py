# SPDX-License-Identifier: GPL-3.0-only
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import yaml

import fibcompare.core.config as config_module
import fibcompare.core.fib as fib_module


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset the global config and the process-wide Fibonacci cache around a test."""
    config_module.config = None
    fib_module._default_cache = None
    yield
    config_module.config = None
    fib_module._default_cache = None


@pytest.fixture(autouse=True)
def reset_app_logger() -> Generator[None, None, None]:
    """Drop handlers and level that CLI invocations set on the application logger."""
    logger = logging.getLogger("fibcompare")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_config(tmp_path: Path) -> Any:
    """Return a function that dumps a dict into a YAML config file and returns its path."""

    def _write(data: dict[str, Any], name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data))
        return path

    return _write
