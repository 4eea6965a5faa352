"""Allow ``python -m flagscan`` invocation.

Delegates to the demo program's error-boundary entry point so that
``python -m flagscan`` behaves identically to the ``flagscan-demo``
console script.
"""

from __future__ import annotations

from flagscan.cli.app import cli

if __name__ == "__main__":
    cli()
