"""Core layer — problem model, severity policy, fault classification, rendering.

Rules
-----
* No ``print()`` calls; output goes through an ``OutputSink``.
* No network I/O.
* No imports from ``cli`` or ``infra``.
"""

from halcli.core.classifier import classify_fault
from halcli.core.models import Location, Problem, ProblemSet
from halcli.core.outcome import Outcome, Structured, Success, Unreachable
from halcli.core.payload import problem_set_from_payload
from halcli.core.protocols import Action, OutputSink
from halcli.core.rendering import render_outcome, render_problem_set, render_unreachable
from halcli.core.severity import Severity, SinkLevel

__all__: list[str] = [
    "Action",
    "Location",
    "Outcome",
    "OutputSink",
    "Problem",
    "ProblemSet",
    "Severity",
    "SinkLevel",
    "Structured",
    "Success",
    "Unreachable",
    "classify_fault",
    "problem_set_from_payload",
    "render_outcome",
    "render_problem_set",
    "render_unreachable",
]
