"""Infrastructure: read a pre-parsed invocation handed over as JSON.

The legacy parser can dump its result as::

    {"command": "status",
     "arguments": {"site": "@dev"},
     "options": {"yes": true, "fields": ["name", "uri"]},
     "interactive": false}

Every key is optional.  Only the JSON *shape* is checked here; no
argument or option syntax is parsed and no value is coerced.

Rules
-----
* No user-facing output.
* Every I/O or decoding failure is re-raised as
  :class:`~legacy_input.exceptions.InvocationLoadError`.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

from legacy_input.core.models import ArgumentValue, OptionValue, ParsedInvocation
from legacy_input.exceptions import InvocationLoadError

logger = logging.getLogger(__name__)

STDIN_SOURCE: str = "-"
"""Source name that selects standard input instead of a file."""

_EXPECTED_SHAPE_HINT = (
    'Expected {"command": str, "arguments": {...}, "options": {...}, "interactive": bool}.'
)


# ---------------------------------------------------------------------------
# Value shape checks (pure)
# ---------------------------------------------------------------------------

def _is_option_value(value: object) -> bool:
    """Return ``True`` for str, bool, int, float, list of str, or ``None``."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return True
    if isinstance(value, list):
        return all(isinstance(item, str) for item in value)
    return False


def _require_object(payload: dict[str, Any], key: str) -> dict[str, Any]:
    """Return ``payload[key]`` as a dict, ``{}`` when missing."""
    raw = payload.get(key, {})
    if not isinstance(raw, dict):
        raise InvocationLoadError(
            f"'{key}' must be a JSON object, got {type(raw).__name__}.",
            hint=_EXPECTED_SHAPE_HINT,
        )
    return raw


def _parse_arguments(payload: dict[str, Any]) -> dict[str, ArgumentValue]:
    raw = _require_object(payload, "arguments")
    for name, value in raw.items():
        if value is not None and not isinstance(value, str):
            raise InvocationLoadError(
                f"Argument '{name}' must be a string or null, got {type(value).__name__}.",
            )
    return dict(raw)


def _parse_options(payload: dict[str, Any]) -> dict[str, OptionValue]:
    raw = _require_object(payload, "options")
    for name, value in raw.items():
        if not _is_option_value(value):
            raise InvocationLoadError(
                f"Option '{name}' has an unsupported value: {value!r}.",
                hint="Option values must be a string, number, boolean, null, or list of strings.",
            )
    return dict(raw)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_invocation(text: str) -> ParsedInvocation:
    """Decode a JSON document into a :class:`ParsedInvocation`.

    Raises
    ------
    InvocationLoadError
        If *text* is not valid JSON or does not have the expected shape.
    """
    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvocationLoadError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno}).",
            hint=_EXPECTED_SHAPE_HINT,
        ) from exc

    if not isinstance(payload, dict):
        raise InvocationLoadError(
            f"Invocation must be a JSON object, got {type(payload).__name__}.",
            hint=_EXPECTED_SHAPE_HINT,
        )

    command = payload.get("command")
    if command is not None and not isinstance(command, str):
        raise InvocationLoadError("'command' must be a string or null.")

    interactive = payload.get("interactive", True)
    if not isinstance(interactive, bool):
        raise InvocationLoadError("'interactive' must be true or false.")

    invocation = ParsedInvocation(
        arguments=_parse_arguments(payload),
        options=_parse_options(payload),
        command=command,
        interactive=interactive,
    )
    logger.debug(
        "Parsed invocation: command=%r, %d argument(s), %d option(s)",
        invocation.command,
        len(invocation.arguments),
        len(invocation.options),
    )
    return invocation


def load_invocation(source: str) -> ParsedInvocation:
    """Read and decode an invocation from a file path, or stdin for ``"-"``.

    Raises
    ------
    InvocationLoadError
        If the source cannot be read or decoded.
    """
    if source == STDIN_SOURCE:
        logger.debug("Reading invocation from stdin")
        return parse_invocation(sys.stdin.read())

    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise InvocationLoadError(
            f"Invocation file not found: {path}",
            hint=f"Pass a JSON file path, or '{STDIN_SOURCE}' to read from stdin.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InvocationLoadError(f"Cannot read {path}: {exc}") from exc

    logger.debug("Read invocation from %s", path)
    return parse_invocation(text)
