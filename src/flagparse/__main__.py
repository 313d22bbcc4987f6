"""Allow ``python -m flagparse`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m flagparse`` behaves identically to the ``flagparse``
console script.
"""

from __future__ import annotations

from flagparse.cli.app import cli

if __name__ == "__main__":
    cli()
