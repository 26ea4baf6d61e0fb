"""Resolve the selected command, run its action once, and render failures.

The action's own success output is its business; this module only
speaks when the action fails with an operational fault.  Classification
happens before anything is rendered, and unclassified faults are
re-raised untouched for the top-level error boundary.
"""

from __future__ import annotations

import argparse
import logging

from halcli.cli.tree import CommandNode, parsed_path
from halcli.core.classifier import classify_fault
from halcli.core.outcome import Outcome, Success
from halcli.core.protocols import OutputSink
from halcli.core.rendering import render_outcome
from halcli.exceptions import CommandTreeError

logger = logging.getLogger(__name__)


def invoke(node: CommandNode, args: argparse.Namespace) -> Outcome:
    """Run *node*'s action exactly once and capture how it ended."""
    if node.action is None:
        raise CommandTreeError(f"{node.full_name!r} was selected but has no action.")
    try:
        value = node.action.execute(args)
    except Exception as exc:
        outcome = classify_fault(exc)
        if outcome is None:
            raise
        logger.debug("%s failed: %s", node.full_name, type(outcome).__name__)
        return outcome
    return Success(value=value)


def execute(root: CommandNode, args: argparse.Namespace, sink: OutputSink) -> Outcome:
    """Resolve the parsed command under *root*, run it and render any failure."""
    node = root.resolve(parsed_path(args))
    logger.debug("dispatching %s", node.full_name)
    outcome = invoke(node, args)
    render_outcome(outcome, sink)
    return outcome
