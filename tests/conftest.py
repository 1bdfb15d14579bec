"""Shared pytest fixtures and configuration for the legacy-input test suite.

Guidelines
----------
* No network access and no dependence on OS state.
* Optional UI packages are hidden through ``sys.modules``, never uninstalled.
* The CLI configures the package logger; it is restored after every test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from legacy_input.cli.log import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
