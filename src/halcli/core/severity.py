"""Severity policy for daemon problems.

Severities form a total order ``INFO < WARNING < ERROR < FATAL``.  Each
severity maps onto exactly one sink level; anything outside the known
set is rejected with :class:`~halcli.exceptions.UnknownSeverityError`
rather than being coerced to a default.
"""

from __future__ import annotations

import enum

from halcli.exceptions import UnknownSeverityError


class Severity(enum.IntEnum):
    """Ordinal impact of a single problem."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    FATAL = 3


class SinkLevel(str, enum.Enum):
    """Output channels a rendered line can be emitted on."""

    ERROR = "error"
    WARNING = "warning"
    REMEDIATION = "remediation"
    SUCCESS = "success"
    RAW = "raw"


_SINK_LEVELS: dict[Severity, SinkLevel] = {
    Severity.INFO: SinkLevel.WARNING,
    Severity.WARNING: SinkLevel.WARNING,
    Severity.ERROR: SinkLevel.ERROR,
    Severity.FATAL: SinkLevel.ERROR,
}


def parse_severity(value: object) -> Severity:
    """Convert a wire value (``"warning"``, ``"FATAL"``, …) into a :class:`Severity`.

    Raises
    ------
    UnknownSeverityError
        If *value* is not the name of a known severity.
    """
    if isinstance(value, Severity):
        return value
    if isinstance(value, str):
        try:
            return Severity[value.strip().upper()]
        except KeyError:
            pass
    raise UnknownSeverityError(f"Unknown severity level {value!r}")


def sink_level_for(severity: object) -> SinkLevel:
    """Return the sink level a problem of *severity* is emitted at."""
    # Plain ints compare equal to IntEnum members; only real members count.
    if not isinstance(severity, Severity) or severity not in _SINK_LEVELS:
        raise UnknownSeverityError(f"Unknown severity level {severity!r}")
    return _SINK_LEVELS[severity]
