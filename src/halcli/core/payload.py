"""Decode the daemon's JSON problem payload into domain models.

Expected shape::

    {
      "problems": [
        {
          "severity": "ERROR",
          "message": "...",
          "remediation": "...",          # optional, may be null
          "location": {"deployment": "default", "ci": "travis"}   # optional
        }
      ]
    }

Any deviation raises :class:`~halcli.exceptions.MalformedPayloadError`
except an unrecognised severity, which raises
:class:`~halcli.exceptions.UnknownSeverityError`.
"""

from __future__ import annotations

from typing import Any

from halcli.core.models import Location, Problem, ProblemSet
from halcli.core.severity import parse_severity
from halcli.exceptions import MalformedPayloadError

_LOCATION_KEYS: tuple[str, ...] = (
    "deployment",
    "provider",
    "account",
    "ci",
    "master",
    "webhook",
    "field",
)


def problem_set_from_payload(payload: Any) -> ProblemSet:
    """Build a :class:`ProblemSet` from a decoded JSON payload."""
    if not isinstance(payload, dict):
        raise MalformedPayloadError(
            f"Expected a problem set object, got {type(payload).__name__}.",
        )
    raw_problems = payload.get("problems")
    if not isinstance(raw_problems, list):
        raise MalformedPayloadError("Problem set payload has no 'problems' list.")
    return ProblemSet(
        problems=tuple(
            _parse_problem(index, raw) for index, raw in enumerate(raw_problems)
        ),
    )


def _parse_problem(index: int, raw: Any) -> Problem:
    if not isinstance(raw, dict):
        raise MalformedPayloadError(f"Problem #{index} is not an object.")

    message = raw.get("message")
    if not isinstance(message, str) or not message.strip():
        raise MalformedPayloadError(f"Problem #{index} has no message.")

    severity = raw.get("severity")
    if not isinstance(severity, str):
        raise MalformedPayloadError(f"Problem #{index} has no severity.")

    remediation = raw.get("remediation")
    if remediation is None:
        remediation = ""
    elif not isinstance(remediation, str):
        raise MalformedPayloadError(f"Problem #{index} has a non-text remediation.")

    return Problem(
        severity=parse_severity(severity),
        message=message,
        location=_parse_location(index, raw.get("location")),
        remediation=remediation,
    )


def _parse_location(index: int, raw: Any) -> Location | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise MalformedPayloadError(f"Problem #{index} has a malformed location.")
    values: dict[str, str | None] = {}
    for key in _LOCATION_KEYS:
        value = raw.get(key)
        if value is not None and not isinstance(value, str):
            raise MalformedPayloadError(
                f"Problem #{index} location field {key!r} is not text.",
            )
        values[key] = value or None
    location = Location(**values)
    # All-empty coordinates are a global problem.
    return location if location else None
