"""Allow ``python -m halcli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m halcli`` behaves identically to the ``hal`` console
script.
"""

from __future__ import annotations

from halcli.cli.app import cli

if __name__ == "__main__":
    cli()
