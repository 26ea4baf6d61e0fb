"""Assembly of the ``hal`` command tree.

The tree is rebuilt on every invocation from fixed value objects; there
is no runtime discovery of commands.
"""

from __future__ import annotations

import argparse

from rich.console import Console

from halcli.cli.commands.config import build_config_node
from halcli.cli.commands.context import CommandContext, help_node
from halcli.cli.commands.deploy import build_deploy_node
from halcli.cli.doctor import DoctorAction
from halcli.cli.tree import CommandNode
from halcli.version import __version__


class VersionAction:
    def __init__(self, ctx: CommandContext) -> None:
        self._ctx = ctx

    def execute(self, args: argparse.Namespace) -> None:
        self._ctx.sink.raw(__version__)


def build_command_tree(ctx: CommandContext, console: Console) -> CommandNode:
    """Return the unwired root node of the ``hal`` command tree."""
    root = help_node("hal", ctx.sink, description="Configure and deploy through the daemon.")
    root.register(build_config_node(ctx))
    root.register(build_deploy_node(ctx))
    root.register(
        CommandNode(
            "doctor",
            action=DoctorAction(ctx.client, console),
            description="Check the local environment and the daemon.",
        ),
    )
    root.register(
        CommandNode(
            "version",
            action=VersionAction(ctx),
            description="Print the halcli version.",
        ),
    )
    return root


__all__: list[str] = ["CommandContext", "build_command_tree"]
