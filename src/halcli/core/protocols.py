"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on the Rich console
or the argparse machinery in ``cli``.
"""

from __future__ import annotations

import argparse
from typing import Protocol


class OutputSink(Protocol):
    """Append-only destination for rendered lines, one method per channel.

    The order of calls is observable and must be preserved exactly.
    """

    def error(self, line: str) -> None:
        ...  # pragma: no cover

    def warning(self, line: str) -> None:
        ...  # pragma: no cover

    def remediation(self, line: str) -> None:
        ...  # pragma: no cover

    def success(self, line: str) -> None:
        ...  # pragma: no cover

    def raw(self, line: str) -> None:
        """Emit *line* unstyled; ``raw("")`` is a blank separator."""
        ...  # pragma: no cover


class Action(Protocol):
    """What a command node does when it is the one selected.

    Implementations may perform arbitrary work, including blocking
    daemon calls.  Failures are raised, never returned; the return value
    is opaque to the dispatcher except that an ``int`` is used as the
    process exit code.
    """

    def execute(self, args: argparse.Namespace) -> object:
        ...  # pragma: no cover
