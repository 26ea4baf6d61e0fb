"""``hal config`` — inspect and edit the deployment's configuration.

Each action is a thin wrapper around one daemon route; validation and
persistence happen daemon-side.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

from halcli.cli.commands.context import CommandContext, add_validate_flag, help_node
from halcli.cli.tree import CommandNode


def _config_path(ctx: CommandContext, suffix: str = "") -> str:
    return f"/v1/config/deployments/{ctx.deployment()}/{suffix}"


class ShowConfigAction:
    """Print the whole deployment configuration as JSON."""

    def __init__(self, ctx: CommandContext) -> None:
        self._ctx = ctx

    def execute(self, args: argparse.Namespace) -> None:
        config = self._ctx.client.get(_config_path(self._ctx))
        self._ctx.sink.raw(json.dumps(config, indent=2, sort_keys=True))


class ShowTravisAction:
    def __init__(self, ctx: CommandContext) -> None:
        self._ctx = ctx

    def execute(self, args: argparse.Namespace) -> None:
        travis: dict[str, Any] = self._ctx.client.get(_config_path(self._ctx, "ci/travis/")) or {}
        state = "enabled" if travis.get("enabled") else "disabled"
        masters = travis.get("masters") or []
        self._ctx.sink.raw(f"Travis CI: {state}")
        self._ctx.sink.raw(f"Masters: {len(masters)}")


class SetTravisEnabledAction:
    """Enable or disable the Travis CI integration."""

    def __init__(self, ctx: CommandContext, *, enabled: bool) -> None:
        self._ctx = ctx
        self._enabled = enabled

    def execute(self, args: argparse.Namespace) -> None:
        response = self._ctx.client.put(
            _config_path(self._ctx, "ci/travis/enabled/"),
            self._enabled,
            validate=getattr(args, "validate", True),
        )
        self._ctx.report_problems(response)
        verb = "enabled" if self._enabled else "disabled"
        self._ctx.sink.success(f"Successfully {verb} travis")


class ListTravisMastersAction:
    def __init__(self, ctx: CommandContext) -> None:
        self._ctx = ctx

    def execute(self, args: argparse.Namespace) -> None:
        masters = self._ctx.client.get(_config_path(self._ctx, "ci/travis/masters/")) or []
        if not masters:
            self._ctx.sink.warning("No configured travis masters.")
            return
        for master in masters:
            name = master.get("name", "?")
            address = master.get("address")
            self._ctx.sink.raw(f"  - {name}" + (f" ({address})" if address else ""))


def build_config_node(ctx: CommandContext) -> CommandNode:
    """``config`` → ``ci`` → ``travis`` → {``enable``, ``disable``, ``master`` → ``list``}."""
    config = CommandNode(
        "config",
        action=ShowConfigAction(ctx),
        description="Show the current deployment's configuration.",
    )

    ci = config.register(
        help_node("ci", ctx.sink, description="Configure continuous integration services."),
    )
    travis = ci.register(
        CommandNode(
            "travis",
            action=ShowTravisAction(ctx),
            description="Show the Travis CI settings.",
        ),
    )
    travis.register(
        CommandNode(
            "enable",
            action=SetTravisEnabledAction(ctx, enabled=True),
            description="Enable Travis CI.",
            add_arguments=add_validate_flag,
        ),
    )
    travis.register(
        CommandNode(
            "disable",
            action=SetTravisEnabledAction(ctx, enabled=False),
            description="Disable Travis CI.",
            add_arguments=add_validate_flag,
        ),
    )
    master = travis.register(
        help_node("master", ctx.sink, description="Manage Travis masters."),
    )
    master.register(
        CommandNode(
            "list",
            action=ListTravisMastersAction(ctx),
            description="List the configured Travis masters.",
        ),
    )
    return config
