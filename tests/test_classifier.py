"""Tests for fault classification (core/classifier.py)."""

from __future__ import annotations

import pytest

from halcli.core.classifier import classify_fault, iter_exception_chain
from halcli.core.models import Problem, ProblemSet
from halcli.core.outcome import Structured, Unreachable
from halcli.core.severity import Severity
from halcli.exceptions import (
    CommandTreeError,
    MalformedPayloadError,
    StructuredFailure,
    UnreachableDaemonError,
)


def _chain(*excs: BaseException) -> BaseException:
    """Link *excs* outermost first via ``__cause__`` and return the outermost."""
    for outer, inner in zip(excs, excs[1:]):
        outer.__cause__ = inner
    return excs[0]


def _problem_set() -> ProblemSet:
    return ProblemSet(problems=(Problem(Severity.ERROR, "rejected"),))


# ---------------------------------------------------------------------------
# Chain traversal
# ---------------------------------------------------------------------------

class TestExceptionChain:
    def test_follows_cause(self) -> None:
        a, b, c = RuntimeError("a"), ValueError("b"), OSError("c")
        assert list(iter_exception_chain(_chain(a, b, c))) == [a, b, c]

    def test_follows_implicit_context(self) -> None:
        try:
            try:
                raise ConnectionRefusedError(111, "Connection refused")
            except ConnectionRefusedError:
                raise RuntimeError("wrapper")
        except RuntimeError as exc:
            chain = list(iter_exception_chain(exc))
        assert [type(e) for e in chain] == [RuntimeError, ConnectionRefusedError]

    def test_suppressed_context_is_skipped(self) -> None:
        outer = RuntimeError("outer")
        outer.__context__ = ConnectionError("hidden")
        outer.__suppress_context__ = True
        assert list(iter_exception_chain(outer)) == [outer]

    def test_cycles_terminate(self) -> None:
        a, b = RuntimeError("a"), RuntimeError("b")
        a.__cause__ = b
        b.__cause__ = a
        assert list(iter_exception_chain(a)) == [a, b]


# ---------------------------------------------------------------------------
# Unreachable
# ---------------------------------------------------------------------------

class TestUnreachable:
    def test_direct_unreachable_error(self) -> None:
        outcome = classify_fault(UnreachableDaemonError("Connection refused"))
        assert outcome == Unreachable(message="Connection refused")

    def test_builtin_connection_error(self) -> None:
        outcome = classify_fault(ConnectionRefusedError(111, "Connection refused"))
        assert outcome == Unreachable(message="Connection refused")

    def test_wrapped_once(self) -> None:
        exc = _chain(RuntimeError("request failed"), ConnectionRefusedError(111, "Connection refused"))
        assert classify_fault(exc) == Unreachable(message="Connection refused")

    def test_wrapped_many_times(self) -> None:
        exc = _chain(
            RuntimeError("outer"),
            ValueError("middle"),
            OSError("inner"),
            ConnectionRefusedError(111, "Connection refused"),
        )
        assert classify_fault(exc) == Unreachable(message="Connection refused")

    def test_message_without_errno(self) -> None:
        assert classify_fault(ConnectionRefusedError("no route")) == Unreachable(message="no route")

    def test_unreachable_wins_over_structured(self) -> None:
        exc = _chain(StructuredFailure(_problem_set()), ConnectionRefusedError(111, "refused"))
        assert isinstance(classify_fault(exc), Unreachable)


# ---------------------------------------------------------------------------
# Structured
# ---------------------------------------------------------------------------

class TestStructured:
    def test_direct(self) -> None:
        ps = _problem_set()
        assert classify_fault(StructuredFailure(ps)) == Structured(problem_set=ps)

    def test_wrapped(self) -> None:
        ps = _problem_set()
        exc = _chain(RuntimeError("action failed"), StructuredFailure(ps))
        assert classify_fault(exc) == Structured(problem_set=ps)


# ---------------------------------------------------------------------------
# Not operational
# ---------------------------------------------------------------------------

class TestUnclassified:
    def test_programming_error(self) -> None:
        assert classify_fault(KeyError("x")) is None

    def test_plain_os_error_is_not_a_connection_failure(self) -> None:
        assert classify_fault(FileNotFoundError(2, "No such file")) is None

    def test_malformed_payload_is_never_structured(self) -> None:
        exc = _chain(MalformedPayloadError("not a problem set"), StructuredFailure(_problem_set()))
        assert classify_fault(exc) is None

    def test_internal_error_masks_nothing_below_it(self) -> None:
        exc = _chain(CommandTreeError("broken"), ConnectionRefusedError(111, "refused"))
        assert classify_fault(exc) is None

    @pytest.mark.parametrize(
        "fault",
        [
            ConnectionResetError(104, "Connection reset by peer"),
            BrokenPipeError(32, "Broken pipe"),
            ConnectionAbortedError(103, "Software caused connection abort"),
        ],
    )
    def test_failure_after_connecting_is_not_unreachable(self, fault: OSError) -> None:
        exc = _chain(RuntimeError("request failed"), fault)
        assert classify_fault(exc) is None
