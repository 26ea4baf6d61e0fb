"""Custom exception hierarchy for halcli.

Errors fall into two families.  :class:`OperationalError` subclasses are
*expected* outcomes of talking to the daemon and are rendered as clean
user output.  :class:`InternalError` subclasses mean the tool itself (or
its contract with the daemon) is broken; they are never recovered and
surface with full diagnostic detail.

Hierarchy
---------
HalcliError
├── OperationalError
│   ├── UnreachableDaemonError
│   └── StructuredFailure
└── InternalError
    ├── DuplicateNameError
    ├── CommandTreeError
    ├── MalformedPayloadError
    └── UnknownSeverityError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from halcli.core.models import ProblemSet


class HalcliError(Exception):
    """Base exception for all halcli errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Expected daemon outcomes ----------------------------------------------

class OperationalError(HalcliError):
    """A failure the operator can act on; rendered without a traceback."""


class UnreachableDaemonError(OperationalError):
    """Raised when a connection to the daemon cannot be established."""


class StructuredFailure(OperationalError):
    """Raised when the daemon was reached and rejected the request.

    Carries the daemon's :class:`~halcli.core.models.ProblemSet`.
    """

    def __init__(self, problem_set: ProblemSet, *, message: str | None = None) -> None:
        super().__init__(message or f"The daemon reported {len(problem_set)} problem(s).")
        self.problem_set: ProblemSet = problem_set


# --- Internal / contract errors --------------------------------------------

class InternalError(HalcliError):
    """A programming or protocol error; never rendered as a normal failure."""


class DuplicateNameError(InternalError):
    """Raised when two sibling commands are registered under one name."""


class CommandTreeError(InternalError):
    """Raised when the command tree is misused or its invariants break."""


class MalformedPayloadError(InternalError):
    """Raised when a daemon response cannot be decoded into the expected shape."""


class UnknownSeverityError(InternalError):
    """Raised when a problem carries a severity outside the recognised set."""
