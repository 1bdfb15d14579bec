"""legacy-input: pass-through input adapter for pre-parsed invocations.

Presents arguments and options that were already parsed by a legacy
parser under a generic input contract, without re-parsing or
re-validating them.
"""

from legacy_input.core.adapter import InputAdapter
from legacy_input.version import __version__

__all__: list[str] = ["InputAdapter", "__version__"]
