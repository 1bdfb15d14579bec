"""Logging setup for the CLI process.

Library modules only create ``logging.getLogger(__name__)`` loggers;
handlers are attached here, once, by the entry point.  Rich renders the
records when installed, otherwise a plain stderr handler is used.
"""

from __future__ import annotations

import logging
import sys

from legacy_input.cli.console import get_rich_console
from legacy_input.exceptions import EnvironmentError

PACKAGE_LOGGER: str = "legacy_input"

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain stream handler without Rich."""
    try:
        console = get_rich_console()
        from rich.logging import RichHandler
    except (EnvironmentError, ModuleNotFoundError):
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler
    return RichHandler(console=console, show_time=False, show_path=False)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single handler to the package logger.

    Calling this again replaces the previous handler instead of
    stacking a second one.

    Parameters
    ----------
    verbose:
        ``True`` logs DEBUG records, otherwise only WARNING and above.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
