"""CLI application entry point for ``hal``.

This module is the **sole error boundary** for the entire application.
Daemon failures are rendered by the dispatcher and turned into an exit
code here; every other error is caught by :func:`cli`, which decides how
much detail to show and which exit code to use.

Architecture notes
------------------
* No business logic lives here — commands live in ``cli.commands`` and
  talk to the daemon through ``infra``.
* Settings are resolved once, before the command tree is built, and are
  passed explicitly to the sink and the daemon client.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError
from rich.markup import escape

from halcli.cli import exit_codes
from halcli.cli.commands import CommandContext, build_command_tree
from halcli.cli.console import ConsoleSink, build_console
from halcli.cli.dispatch import execute
from halcli.cli.log import configure_logging
from halcli.config import HalSettings
from halcli.core.outcome import Outcome, Success
from halcli.exceptions import HalcliError, InternalError
from halcli.infra.daemon_client import DaemonClient
from halcli.version import __version__


# ---------------------------------------------------------------------------
# Argument parsers
# ---------------------------------------------------------------------------

def _global_options_parser() -> argparse.ArgumentParser:
    """Options accepted before any sub-command.

    Parsed on their own first, because the sink and the daemon client
    must exist before the command tree can be built.
    """
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"hal {__version__}",
    )
    parser.add_argument(
        "--daemon-endpoint",
        default=None,
        help="Base URL of the daemon (env: HAL_DAEMON_ENDPOINT).",
    )
    parser.add_argument(
        "--deployment",
        default=None,
        help="Deployment to operate on (env: HAL_DEPLOYMENT).",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (env: HAL_COLOR=false).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log daemon requests and dispatch decisions to stderr.",
    )
    return parser


def _leading_options(
    global_options: argparse.ArgumentParser, argv: list[str] | None,
) -> argparse.Namespace:
    """Parse the global options that precede the first command.

    Global options are only accepted before the command path, so anything
    from the first positional onwards is left for the full parser.
    """
    parser = argparse.ArgumentParser(
        add_help=False, allow_abbrev=False, parents=[global_options],
    )
    parser.add_argument("command", nargs=argparse.REMAINDER)
    options, _ = parser.parse_known_args(argv)
    return options


def _build_parser(global_options: argparse.ArgumentParser) -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="hal",
        description="Configure and deploy through the daemon.",
        parents=[global_options],
    )


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

def _load_settings(options: argparse.Namespace) -> HalSettings:
    try:
        settings = HalSettings()
    except ValidationError as exc:
        raise HalcliError(
            f"Invalid configuration: {exc}",
            hint="Check the HAL_* environment variables and your .env file.",
        ) from exc
    return settings.with_overrides(
        daemon_endpoint=options.daemon_endpoint,
        deployment=options.deployment,
        color=False if options.no_color else None,
    )


def _build_client(settings: HalSettings) -> DaemonClient:
    return DaemonClient(settings.daemon_endpoint, timeout=settings.timeout_seconds)


def exit_code_for(outcome: Outcome) -> int:
    """Map a dispatch outcome onto a process exit code."""
    if isinstance(outcome, Success):
        value = outcome.value
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return exit_codes.SUCCESS
    return exit_codes.OPERATION_FAILED


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the hal CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    global_options = _global_options_parser()
    options = _leading_options(global_options, argv)

    settings = _load_settings(options)
    configure_logging(debug=options.debug, color=settings.color)
    sink = ConsoleSink(build_console(color=settings.color))

    with _build_client(settings) as client:
        context = CommandContext(client=client, sink=sink, settings=settings)
        root = build_command_tree(context, sink.console)
        parser = _build_parser(global_options)
        root.wire(parser)
        args = parser.parse_args(argv)
        outcome = execute(root, args, sink)

    return exit_code_for(outcome)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Internal errors are shown with their full traceback; they mean the
    tool or its contract with the daemon is broken, so no remediation is
    offered.
    """
    console = build_console(color=True, stderr=True)
    try:
        code = main()
        sys.exit(code)
    except InternalError:
        console.print("[bold red]Internal error.[/bold red] Please report this issue.")
        console.print_exception()
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    except HalcliError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.OPERATION_FAILED)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception:  # noqa: BLE001
        console.print("[bold red]Unexpected error.[/bold red] Please report this issue.")
        console.print_exception()
        sys.exit(exit_codes.UNEXPECTED_ERROR)
