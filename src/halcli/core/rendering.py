"""Render daemon failures onto an :class:`~halcli.core.protocols.OutputSink`.

Problems are printed least severe first so that the most severe one is
the last thing on screen, right above the prompt.  Each problem becomes
one block::

    In default.travis:          (or "Global:")
    <message>
    <remediation>               (only when non-empty)
    <blank line>
"""

from __future__ import annotations

from halcli.core.models import Problem, ProblemSet
from halcli.core.outcome import Outcome, Structured, Success, Unreachable
from halcli.core.protocols import OutputSink
from halcli.core.severity import SinkLevel, sink_level_for

UNREACHABLE_REMEDIATION: str = "Is your daemon running?"


def location_label(problem: Problem) -> str:
    if problem.location:
        return f"In {problem.location}:"
    return "Global:"


def render_problem_set(problem_set: ProblemSet, sink: OutputSink) -> None:
    """Emit every problem in *problem_set*, most severe last.

    All severities are checked before the first line is written, so an
    unknown severity raises
    :class:`~halcli.exceptions.UnknownSeverityError` with no output at all.
    """
    ordered = problem_set.sorted_by_severity()
    levels = [sink_level_for(problem.severity) for problem in ordered]

    for problem, level in zip(ordered, levels):
        emit = sink.error if level is SinkLevel.ERROR else sink.warning
        emit(location_label(problem))
        emit(problem.message)
        if problem.remediation:
            sink.remediation(problem.remediation)
        sink.raw("")


def render_unreachable(message: str, sink: OutputSink) -> None:
    sink.error(message)
    sink.remediation(UNREACHABLE_REMEDIATION)


def render_outcome(outcome: Outcome, sink: OutputSink) -> None:
    """Render a failed outcome; a success is the action's own business."""
    if isinstance(outcome, Success):
        return
    if isinstance(outcome, Unreachable):
        render_unreachable(outcome.message, sink)
    elif isinstance(outcome, Structured):
        render_problem_set(outcome.problem_set, sink)
    else:
        raise TypeError(f"Unknown outcome {outcome!r}")
