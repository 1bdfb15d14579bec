"""Allow ``python -m legacy_input`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m legacy_input`` behaves identically to the ``legacy-input``
console script.
"""

from __future__ import annotations

from legacy_input.cli.app import cli

if __name__ == "__main__":
    cli()
