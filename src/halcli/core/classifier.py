"""Classify a fault raised by a command action.

Two shapes are operational and become an :data:`Outcome`:

* **unreachable** — somewhere in the exception chain a connection could
  not be established (:class:`UnreachableDaemonError` or a built-in
  :class:`ConnectionRefusedError`), however deeply it is wrapped;
* **structured** — the daemon answered with a problem set
  (:class:`StructuredFailure`).

A reset or broken pipe means the daemon was reached; it is not
unreachable.  Everything else, and in particular any
:class:`InternalError`, is left to the caller to re-raise unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator

from halcli.core.outcome import Outcome, Structured, Unreachable
from halcli.exceptions import InternalError, StructuredFailure, UnreachableDaemonError


def iter_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its causes, outermost first.

    Follows ``__cause__`` and, unless suppressed, ``__context__``.  Each
    exception is visited at most once.
    """
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None


def classify_fault(exc: BaseException) -> Outcome | None:
    """Return the operational outcome *exc* represents, or ``None``."""
    chain: list[BaseException] = []
    for link in iter_exception_chain(exc):
        if isinstance(link, InternalError):
            break
        chain.append(link)

    for link in chain:
        if isinstance(link, UnreachableDaemonError):
            return Unreachable(message=str(link))
        if isinstance(link, ConnectionRefusedError):
            return Unreachable(message=_connection_message(link))

    for link in chain:
        if isinstance(link, StructuredFailure):
            return Structured(problem_set=link.problem_set)

    return None


def _connection_message(exc: ConnectionRefusedError) -> str:
    # "[Errno 111] Connection refused" -> "Connection refused"
    return exc.strerror or str(exc) or type(exc).__name__
