"""Custom exception hierarchy for legacy-input.

Every user-visible error condition maps to a subclass of
:class:`LegacyInputError` so that the CLI error boundary can render a
clean message without leaking stack traces.

Hierarchy
---------
LegacyInputError
├── OptionNotFoundError   (also a ``KeyError``)
├── InvocationLoadError
└── EnvironmentError
"""

from __future__ import annotations


class LegacyInputError(Exception):
    """Base exception for all legacy-input errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Adapter access --------------------------------------------------------

class OptionNotFoundError(LegacyInputError, KeyError):
    """Raised when an option that is not in the option set is read directly.

    Subclasses :class:`KeyError` so callers written against plain
    mapping semantics keep working.
    """

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Option '{name}' is not set.",
            hint="Check has_option() first, or use get_parameter_option() with a default.",
        )
        self.name: str = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])


# --- Invocation loading ----------------------------------------------------

class InvocationLoadError(LegacyInputError):
    """Raised when a pre-parsed invocation cannot be read or has the wrong shape."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(LegacyInputError):
    """Raised when an optional runtime dependency is not available."""
