"""CLI application entry point for legacy-input.

``legacy-input`` loads an invocation the legacy parser already produced,
wraps it in an :class:`~legacy_input.core.adapter.InputAdapter`, runs the
binding hooks the way a command dispatcher would, and shows what the
dispatcher would see.

This module is the **sole error boundary** for the application.  It
catches :class:`~legacy_input.exceptions.LegacyInputError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, and maps them to
well-defined exit codes.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from legacy_input.cli import exit_codes
from legacy_input.cli.console import console
from legacy_input.exceptions import LegacyInputError
from legacy_input.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``legacy-input <file>``   show the adapter view of a JSON invocation
    * ``legacy-input -``        same, reading the invocation from stdin
    * ``legacy-input --version``
    """
    parser = argparse.ArgumentParser(
        prog="legacy-input",
        description="Show how a pre-parsed invocation looks through the input contract.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="JSON file holding the parsed invocation, or '-' for stdin.",
    )
    parser.add_argument(
        "--command",
        default=None,
        metavar="NAME",
        help="Command name to place first, overriding the one in SOURCE.",
    )
    parser.add_argument(
        "-n",
        "--no-interaction",
        action="store_true",
        help="Mark the invocation as non-interactive.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_show(source: str, *, command: str | None, no_interaction: bool) -> int:
    """Load *source*, adapt it, and render the adapter view."""
    from legacy_input.cli.view import render_input
    from legacy_input.core.adapter import InputAdapter
    from legacy_input.infra.invocation_loader import load_invocation

    invocation = load_invocation(source)
    if command is not None:
        invocation = dataclasses.replace(invocation, command=command)
    if no_interaction:
        invocation = dataclasses.replace(invocation, interactive=False)
    adapter = InputAdapter.from_invocation(invocation)

    # Same calls a dispatcher makes before running the command.
    adapter.bind(None)
    adapter.validate()

    render_input(adapter)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the legacy-input CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    from legacy_input.cli.log import configure_logging

    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is not None and not args.command:
        parser.error("--command must not be empty")
    configure_logging(verbose=args.verbose)

    if args.source is None:
        parser.print_help()
        return exit_codes.SUCCESS

    logger.debug("Showing invocation from %s", args.source)
    return _handle_show(
        args.source,
        command=args.command,
        no_interaction=args.no_interaction,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except LegacyInputError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
