"""Allow ``python -m scriptkit`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m scriptkit`` behaves identically to the ``scriptkit``
console script.
"""

from __future__ import annotations

from scriptkit.cli.app import cli

if __name__ == "__main__":
    cli()
