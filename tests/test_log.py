"""Tests for CLI logging setup (cli/log.py)."""

from __future__ import annotations

import logging
import sys

import pytest
from rich.logging import RichHandler

from legacy_input.cli.log import PACKAGE_LOGGER, configure_logging


class TestConfigureLogging:
    def test_uses_rich_handler(self) -> None:
        logger = configure_logging()
        assert logger.name == PACKAGE_LOGGER
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_default_level_is_warning(self) -> None:
        assert configure_logging().level == logging.WARNING

    def test_verbose_level_is_debug(self) -> None:
        assert configure_logging(verbose=True).level == logging.DEBUG

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        configure_logging()
        logger = configure_logging(verbose=True)
        assert len(logger.handlers) == 1

    def test_plain_handler_without_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "rich.console", None)
        monkeypatch.setitem(sys.modules, "rich.logging", None)

        logger = configure_logging()
        handler = logger.handlers[0]
        assert type(handler) is logging.StreamHandler
        assert handler.stream is sys.stderr

    def test_records_reach_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True)
        logging.getLogger("legacy_input.test").debug("handler check message")
        assert "handler check message" in capsys.readouterr().err
