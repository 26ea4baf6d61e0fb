"""Domain models for daemon problem reports.

All models are **frozen** dataclasses — immutable value objects with no
I/O.  Decoding them from the daemon's JSON lives in
:mod:`halcli.core.payload`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from halcli.core.severity import Severity
from halcli.exceptions import UnknownSeverityError


# ---------------------------------------------------------------------------
# Location inside the daemon's configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Location:
    """Coordinates of the configuration node a problem concerns.

    Segments are listed from the outermost (deployment) inwards; unset
    segments are ``None`` and are skipped in the string form.
    """

    deployment: str | None = None
    provider: str | None = None
    account: str | None = None
    ci: str | None = None
    master: str | None = None
    webhook: str | None = None
    field: str | None = None

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(
            value
            for value in (getattr(self, f.name) for f in fields(self))
            if value
        )

    def __bool__(self) -> bool:
        return bool(self.segments)

    def __str__(self) -> str:
        return ".".join(self.segments)


# ---------------------------------------------------------------------------
# Problems
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Problem:
    """A single issue reported by the daemon."""

    severity: Severity
    """How serious the problem is."""

    message: str
    """Human-readable description; never empty."""

    location: Location | None = None
    """Where the problem is, or ``None`` for a global problem."""

    remediation: str = ""
    """Suggested fix.  ``""`` means no remediation is offered."""


@dataclass(frozen=True, slots=True)
class ProblemSet:
    """Every problem the daemon returned for one failed request.

    Problems keep their arrival order; :meth:`sorted_by_severity` gives
    the display order.
    """

    problems: tuple[Problem, ...] = ()

    def __len__(self) -> int:
        return len(self.problems)

    def __bool__(self) -> bool:
        return len(self.problems) > 0

    def sorted_by_severity(self) -> tuple[Problem, ...]:
        """Return the problems least severe first, most severe last.

        The sort is stable, so problems of equal severity keep their
        arrival order.

        Raises
        ------
        UnknownSeverityError
            If any problem carries a value that is not a :class:`Severity`.
        """
        return tuple(sorted(self.problems, key=_severity_key))

    def max_severity(self) -> Severity | None:
        """Return the highest severity present, or ``None`` when empty."""
        if not self.problems:
            return None
        return max(_severity_key(problem) for problem in self.problems)


def _severity_key(problem: Problem) -> Severity:
    if not isinstance(problem.severity, Severity):
        raise UnknownSeverityError(f"Unknown severity level {problem.severity!r}")
    return problem.severity
