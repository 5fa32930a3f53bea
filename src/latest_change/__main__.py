"""Allow ``python -m latest_change`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m latest_change`` behaves identically to the
``latest-change`` console script.
"""

from __future__ import annotations

from latest_change.cli.app import cli

if __name__ == "__main__":
    cli()
