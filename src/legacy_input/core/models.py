"""Domain types for legacy-input.

The argument and option sets are plain dicts: the adapter passes values
through untouched, so there is nothing to model beyond their value
types.  :class:`ParsedInvocation` is the frozen hand-off record produced
by an external parser (or the JSON loader).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

ArgumentValue = Union[str, None]
"""An argument is a string, or ``None`` when it was not supplied."""

OptionValue = Union[str, bool, int, float, list[str], None]
"""Options may be flags, scalars, or repeated string values."""

COMMAND_ARGUMENT: str = "command"
"""Reserved argument key holding the command name, always first when set."""


# ---------------------------------------------------------------------------
# Hand-off record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedInvocation:
    """One command invocation as produced by the legacy parser."""

    arguments: dict[str, ArgumentValue] = field(default_factory=dict)
    """Argument name to value, in the order the parser produced them."""

    options: dict[str, OptionValue] = field(default_factory=dict)
    """Option name to value."""

    command: str | None = None
    """Command name, or ``None`` when the invocation carries none."""

    interactive: bool = True
    """Whether the invocation may prompt the user."""
