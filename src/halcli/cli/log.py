"""Logging setup for the ``hal`` process.

Diagnostics go through the standard :mod:`logging` module and are
rendered on stderr by Rich.  Command output never goes through logging.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from halcli.cli.console import build_console


def configure_logging(*, debug: bool = False, color: bool = True) -> None:
    """Install a single Rich handler on the ``halcli`` logger."""
    handler = RichHandler(
        console=build_console(color=color, stderr=True),
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    package_logger = logging.getLogger("halcli")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    package_logger.propagate = False
