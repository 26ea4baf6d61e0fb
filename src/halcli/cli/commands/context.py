"""Shared plumbing for leaf commands."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any

from halcli.cli.tree import CommandNode
from halcli.config import HalSettings
from halcli.core.payload import problem_set_from_payload
from halcli.core.protocols import OutputSink
from halcli.core.rendering import render_problem_set
from halcli.exceptions import CommandTreeError
from halcli.infra.daemon_client import DaemonClient


@dataclass(frozen=True)
class CommandContext:
    """Collaborators every action is constructed with."""

    client: DaemonClient
    sink: OutputSink
    settings: HalSettings

    def deployment(self) -> str:
        """Return the configured deployment, asking the daemon when unset."""
        if self.settings.deployment:
            return self.settings.deployment
        return str(self.client.get("/v1/config/currentDeployment"))

    def report_problems(self, response: Any) -> None:
        """Show non-blocking problems the daemon attached to a successful response."""
        if isinstance(response, dict) and response.get("problems"):
            render_problem_set(problem_set_from_payload(response), self.sink)


class HelpAction:
    """Print the usage of the node it is attached to."""

    def __init__(self, node: CommandNode, sink: OutputSink) -> None:
        self._node = node
        self._sink = sink

    def execute(self, args: argparse.Namespace) -> None:
        if self._node.parser is None:
            raise CommandTreeError(f"{self._node.full_name!r} is not wired.")
        self._sink.raw(self._node.parser.format_help().rstrip())


def help_node(name: str, sink: OutputSink, *, description: str = "") -> CommandNode:
    """Create an interior node that prints its own help when run bare."""
    node = CommandNode(name, description=description)
    node.action = HelpAction(node, sink)
    return node


def add_validate_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--no-validate",
        dest="validate",
        action="store_false",
        help="Skip the daemon's validation of the change.",
    )
