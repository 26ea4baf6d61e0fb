"""``hal deploy`` — push the current configuration to the target environment."""

from __future__ import annotations

import argparse

from halcli.cli.commands.context import CommandContext, add_validate_flag, help_node
from halcli.cli.tree import CommandNode


class ApplyDeployAction:
    def __init__(self, ctx: CommandContext) -> None:
        self._ctx = ctx

    def execute(self, args: argparse.Namespace) -> None:
        deployment = self._ctx.deployment()
        response = self._ctx.client.post(
            f"/v1/deployments/{deployment}/deploy/",
            validate=getattr(args, "validate", True),
        )
        self._ctx.report_problems(response)
        self._ctx.sink.success(f"Deployment of {deployment!r} succeeded.")


def build_deploy_node(ctx: CommandContext) -> CommandNode:
    deploy = help_node("deploy", ctx.sink, description="Deploy the configured services.")
    deploy.register(
        CommandNode(
            "apply",
            action=ApplyDeployAction(ctx),
            description="Deploy or update the current deployment.",
            add_arguments=add_validate_flag,
        ),
    )
    return deploy
