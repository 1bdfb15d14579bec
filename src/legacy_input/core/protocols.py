"""Protocols (interfaces) for the input contract.

Downstream code depends ONLY on these protocols, never on
:class:`~legacy_input.core.adapter.InputAdapter` itself.  Conformance is
structural: any object with matching methods satisfies them, no
inheritance required.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from legacy_input.core.models import ArgumentValue, OptionValue


@runtime_checkable
class InputContract(Protocol):
    """Contract a command dispatcher expects from its input object.

    Implementations expose arguments and options through accessors and
    accept the binding/validation hooks.  Whether those hooks actually
    check anything is up to the implementation.
    """

    def get_first_argument(self) -> ArgumentValue:
        """Return the first argument value, or ``None`` when there is none."""
        ...  # pragma: no cover

    def has_parameter_option(
        self,
        values: str | Iterable[str],
        only_params: bool = False,
    ) -> bool:
        """Return ``True`` if any of *values* names a present option."""
        ...  # pragma: no cover

    def get_parameter_option(
        self,
        values: str | Iterable[str],
        default: OptionValue = False,
        only_params: bool = False,
    ) -> OptionValue:
        """Return the first present option among *values*, else *default*."""
        ...  # pragma: no cover

    def bind(self, definition: Any) -> None:
        """Bind the input against a schema *definition*."""
        ...  # pragma: no cover

    def validate(self) -> None:
        """Validate bound input.

        Raises
        ------
        Exception
            Strict implementations raise on constraint violations.
        """
        ...  # pragma: no cover

    def get_arguments(self) -> Mapping[str, ArgumentValue]:
        ...  # pragma: no cover

    def get_argument(self, name: str) -> ArgumentValue:
        ...  # pragma: no cover

    def set_argument(self, name: str, value: ArgumentValue) -> None:
        ...  # pragma: no cover

    def has_argument(self, name: str) -> bool:
        ...  # pragma: no cover

    def get_options(self) -> Mapping[str, OptionValue]:
        ...  # pragma: no cover

    def get_option(self, name: str) -> OptionValue:
        ...  # pragma: no cover

    def set_option(self, name: str, value: OptionValue) -> None:
        ...  # pragma: no cover

    def has_option(self, name: str) -> bool:
        ...  # pragma: no cover

    def is_interactive(self) -> bool:
        ...  # pragma: no cover

    def set_interactive(self, interactive: bool) -> None:
        ...  # pragma: no cover


class BindingPolicy(Protocol):
    """Strategy deciding what ``bind`` and ``validate`` do for an input.

    The adapter forwards both hooks to its policy.  The permissive
    policy shipped here does nothing; a strict collaborator may supply
    one that enforces the definition.
    """

    def bind(self, definition: Any, source: InputContract) -> None:
        """Match *source* against *definition*."""
        ...  # pragma: no cover

    def validate(self, source: InputContract) -> None:
        """Check *source* against the last bound definition."""
        ...  # pragma: no cover
