"""Core layer: the input adapter and the contract it satisfies.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from legacy_input.core.adapter import InputAdapter
from legacy_input.core.binding import PermissiveBinding
from legacy_input.core.models import (
    COMMAND_ARGUMENT,
    ArgumentValue,
    OptionValue,
    ParsedInvocation,
)
from legacy_input.core.protocols import BindingPolicy, InputContract

__all__: list[str] = [
    "COMMAND_ARGUMENT",
    "ArgumentValue",
    "BindingPolicy",
    "InputAdapter",
    "InputContract",
    "OptionValue",
    "ParsedInvocation",
    "PermissiveBinding",
]
