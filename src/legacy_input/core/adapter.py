"""Input adapter over pre-parsed arguments and options.

:class:`InputAdapter` stands in wherever an
:class:`~legacy_input.core.protocols.InputContract` is expected.  It is
built from mappings the legacy parser already produced, so:

* Options are never converted back to ``--name=value`` tokens just to be
  parsed again.
* The consuming framework never gets to validate them; ``bind`` and
  ``validate`` go to a :class:`~legacy_input.core.protocols.BindingPolicy`
  that defaults to :class:`~legacy_input.core.binding.PermissiveBinding`.

Guarantees
----------
* No I/O, no ``print()``.
* No type conversion or name normalisation of any value.
* One instance per invocation; not synchronised for concurrent use.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from legacy_input.core.binding import PermissiveBinding
from legacy_input.core.models import (
    COMMAND_ARGUMENT,
    ArgumentValue,
    OptionValue,
    ParsedInvocation,
)
from legacy_input.core.protocols import BindingPolicy
from legacy_input.exceptions import OptionNotFoundError

logger = logging.getLogger(__name__)


def _candidates(values: str | Iterable[str]) -> tuple[str, ...]:
    """Normalise a single option name or a collection of names to a tuple."""
    if isinstance(values, str):
        return (values,)
    return tuple(values)


class InputAdapter:
    """Pass-through implementation of the input contract.

    Parameters
    ----------
    arguments:
        Argument name to value, in parser order.  Copied.
    options:
        Option name to value.  Copied.
    command:
        Optional command name.  When given it is stored under the
        ``"command"`` argument key, ahead of every other argument.  A
        ``"command"`` entry in *arguments* replaces the value but keeps
        that first position.
    interactive:
        Initial interactive flag.
    policy:
        Strategy receiving ``bind``/``validate``.  Defaults to
        :class:`PermissiveBinding`.
    """

    def __init__(
        self,
        arguments: Mapping[str, ArgumentValue],
        options: Mapping[str, OptionValue],
        command: str | None = None,
        interactive: bool = True,
        *,
        policy: BindingPolicy | None = None,
    ) -> None:
        self._arguments: dict[str, ArgumentValue] = {}
        if command:
            self._arguments[COMMAND_ARGUMENT] = command
        self._arguments.update(arguments)

        self._options: dict[str, OptionValue] = dict(options)
        self._interactive: bool = interactive
        self._policy: BindingPolicy = policy if policy is not None else PermissiveBinding()

        logger.debug(
            "InputAdapter created: %d argument(s), %d option(s), command=%r, interactive=%s",
            len(self._arguments),
            len(self._options),
            command,
            interactive,
        )

    @classmethod
    def from_invocation(
        cls,
        invocation: ParsedInvocation,
        *,
        policy: BindingPolicy | None = None,
    ) -> InputAdapter:
        """Build an adapter from a :class:`ParsedInvocation` record."""
        return cls(
            invocation.arguments,
            invocation.options,
            invocation.command,
            invocation.interactive,
            policy=policy,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(arguments={self._arguments!r}, "
            f"options={self._options!r}, interactive={self._interactive!r})"
        )

    # ------------------------------------------------------------------
    # Raw-parameter lookups
    # ------------------------------------------------------------------

    def get_first_argument(self) -> ArgumentValue:
        """Return the value of the first argument in insertion order.

        The key is irrelevant; with a command name set this is the
        command.  Returns ``None`` when there are no arguments.
        """
        return next(iter(self._arguments.values()), None)

    def has_parameter_option(
        self,
        values: str | Iterable[str],
        only_params: bool = False,
    ) -> bool:
        """Return ``True`` if any name in *values* is a key of the option set.

        *only_params* is accepted for contract compatibility and ignored:
        there are no raw tokens, hence no ``--`` terminator to stop at.
        """
        return any(name in self._options for name in _candidates(values))

    def get_parameter_option(
        self,
        values: str | Iterable[str],
        default: OptionValue = False,
        only_params: bool = False,
    ) -> OptionValue:
        """Return the value of the first name in *values* present in the option set.

        Candidates are tried in the order given.  *default* is returned
        when none is present.  *only_params* is ignored, as in
        :meth:`has_parameter_option`.
        """
        for name in _candidates(values):
            if name in self._options:
                return self.get_option(name)
        return default

    # ------------------------------------------------------------------
    # Binding hooks
    # ------------------------------------------------------------------

    def bind(self, definition: Any) -> None:
        """Forward *definition* to the binding policy (a no-op by default)."""
        self._policy.bind(definition, self)

    def validate(self) -> None:
        """Forward to the binding policy (a no-op by default)."""
        self._policy.validate(self)

    # ------------------------------------------------------------------
    # Arguments
    # ------------------------------------------------------------------

    def get_arguments(self) -> dict[str, ArgumentValue]:
        """Return a copy of the argument set, order preserved."""
        return dict(self._arguments)

    def get_argument(self, name: str) -> ArgumentValue:
        """Return the argument *name*, or ``""`` when it is missing or ``None``.

        Use :meth:`has_argument` to tell an empty value from a missing one.
        """
        value = self._arguments.get(name)
        return "" if value is None else value

    def set_argument(self, name: str, value: ArgumentValue) -> None:
        self._arguments[name] = value

    def has_argument(self, name: str) -> bool:
        return name in self._arguments

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def get_options(self) -> dict[str, OptionValue]:
        """Return a copy of the option set."""
        return dict(self._options)

    def get_option(self, name: str) -> OptionValue:
        """Return the option *name*.

        Unlike :meth:`get_argument` there is no fallback value.

        Raises
        ------
        OptionNotFoundError
            If *name* is not in the option set.
        """
        try:
            return self._options[name]
        except KeyError:
            logger.debug("Option %r requested but not set", name)
            raise OptionNotFoundError(name) from None

    def set_option(self, name: str, value: OptionValue) -> None:
        self._options[name] = value

    def has_option(self, name: str) -> bool:
        return name in self._options

    # ------------------------------------------------------------------
    # Interactivity
    # ------------------------------------------------------------------

    def is_interactive(self) -> bool:
        return self._interactive

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
