"""Render what an :class:`~legacy_input.core.protocols.InputContract` exposes.

Everything here reads through the contract's accessors only, so the
output is exactly what a downstream command would observe.
"""

from __future__ import annotations

from typing import Any

from legacy_input.cli.console import output, rich_available
from legacy_input.core.models import ArgumentValue, OptionValue
from legacy_input.core.protocols import InputContract


# ---------------------------------------------------------------------------
# Presentation helpers (pure)
# ---------------------------------------------------------------------------

def format_value(value: ArgumentValue | OptionValue) -> str:
    """Render a value for display without changing its meaning."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ", ".join(value)
    if value == "":
        return '""'
    return str(value)


def build_rows(source: InputContract) -> dict[str, list[tuple[str, str]]]:
    """Collect ``(name, rendered value)`` rows per section."""
    return {
        "Arguments": [
            (name, format_value(value))
            for name, value in source.get_arguments().items()
        ],
        "Options": [
            (name, format_value(value))
            for name, value in source.get_options().items()
        ],
    }


def _summary(source: InputContract) -> list[tuple[str, str]]:
    first = source.get_first_argument()
    return [
        ("First argument", format_value(first) if first is not None else "(none)"),
        ("Interactive", format_value(source.is_interactive())),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render_rich(source: InputContract) -> None:
    from rich.markup import escape
    from rich.table import Table

    for label, value in _summary(source):
        output.print(f"[bold cyan]{label}:[/bold cyan] {escape(value)}")
    output.print()

    for title, rows in build_rows(source).items():
        table: Any = Table(
            title=title,
            show_header=True,
            header_style="bold magenta",
            border_style="dim",
        )
        table.add_column("Name", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        for name, value in rows:
            table.add_row(escape(name), escape(value))
        output.print(table)


def _render_plain(source: InputContract) -> None:
    for label, value in _summary(source):
        output.print(f"{label}: {value}")
    for title, rows in build_rows(source).items():
        output.print()
        output.print(title)
        output.print("-" * 40)
        if not rows:
            output.print("(none)")
        for name, value in rows:
            output.print(f"{name:<16} {value}")


def render_input(source: InputContract) -> None:
    """Print the summary and the argument and option tables."""
    if rich_available():
        _render_rich(source)
    else:
        _render_plain(source)
