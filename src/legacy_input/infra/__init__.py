"""Infrastructure layer: reading invocations handed over by the legacy parser.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Every raw I/O or decoding exception is re-raised as a
  :class:`~legacy_input.exceptions.LegacyInputError` subclass.
"""

from legacy_input.infra.invocation_loader import STDIN_SOURCE, load_invocation, parse_invocation

__all__: list[str] = [
    "STDIN_SOURCE",
    "load_invocation",
    "parse_invocation",
]
