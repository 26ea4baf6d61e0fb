"""``hal doctor`` — environment diagnostics command.

Gathers local and daemon information and renders a Rich table
summarising whether this machine can drive the daemon.

This module lives in the CLI layer — it may import from ``infra`` and
``core``, and it renders via Rich.  No business logic resides here; it
purely collects and displays diagnostic data.
"""

from __future__ import annotations

import argparse
import platform
import sys

from rich.console import Console
from rich.table import Table

from halcli.cli import exit_codes
from halcli.exceptions import StructuredFailure, UnreachableDaemonError
from halcli.infra.daemon_client import DaemonClient
from halcli.version import __version__

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _halcli_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the halcli version row."""
    return "halcli", __version__, OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _daemon_check(client: DaemonClient) -> tuple[str, str, str]:
    """Return (label, value, status) for the daemon reachability row."""
    try:
        client.get("/health")
    except UnreachableDaemonError:
        return "daemon", f"{client.endpoint} (unreachable)", FAIL
    except StructuredFailure:
        return "daemon", f"{client.endpoint} (unhealthy)", WARN
    return "daemon", client.endpoint, OK


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, OK


# ---------------------------------------------------------------------------
# Command action
# ---------------------------------------------------------------------------

class DoctorAction:
    """Run every check and print a summary table."""

    def __init__(self, client: DaemonClient, console: Console) -> None:
        self._client = client
        self._console = console

    def execute(self, args: argparse.Namespace) -> int:
        checks = [
            _halcli_version_check(),
            _python_version_check(),
            _daemon_check(self._client),
            _os_check(),
        ]
        has_failure = any("FAIL" in status for _, _, status in checks)

        table = Table(
            title="hal doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=10)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        self._console.print()
        self._console.print(table)
        self._console.print()

        if has_failure:
            self._console.print("[bold red]Some checks failed.[/bold red]")
            return exit_codes.OPERATION_FAILED
        self._console.print("[bold green]All checks passed.[/bold green]")
        return exit_codes.SUCCESS
