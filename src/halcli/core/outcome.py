"""The result of running one command action.

Exactly one of the three variants is produced per invocation, so
callers handle every case explicitly instead of catching exception
subtypes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from halcli.core.models import ProblemSet


@dataclass(frozen=True, slots=True)
class Success:
    """The action completed; *value* is whatever it returned."""

    value: object = None


@dataclass(frozen=True, slots=True)
class Unreachable:
    """The daemon could not be reached."""

    message: str


@dataclass(frozen=True, slots=True)
class Structured:
    """The daemon was reached and rejected the request."""

    problem_set: ProblemSet


Outcome = Union[Success, Unreachable, Structured]
