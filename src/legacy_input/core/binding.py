"""Permissive binding policy.

Arguments and options reaching the adapter were already parsed and
checked by the legacy parser.  Running the consuming framework's schema
binding on top would reject values it does not know about, so this
policy accepts every definition and every input unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from legacy_input.core.protocols import InputContract

logger = logging.getLogger(__name__)


class PermissiveBinding:
    """:class:`~legacy_input.core.protocols.BindingPolicy` that never checks anything.

    Satisfies the protocol structurally.  Both hooks leave *source*
    untouched and never raise.
    """

    def bind(self, definition: Any, source: InputContract) -> None:
        logger.debug(
            "Ignoring bind() with %s definition",
            type(definition).__name__,
        )

    def validate(self, source: InputContract) -> None:
        logger.debug("Ignoring validate(); input was validated upstream")
