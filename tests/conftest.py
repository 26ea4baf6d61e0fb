"""Shared pytest fixtures and configuration for the halcli test suite.

Guidelines
----------
* No network access in any test — the daemon is an ``httpx.MockTransport``.
* Core tests must be pure — output goes to a recording sink.
* Tests must not depend on ``HAL_*`` variables from the caller's shell.
"""

from __future__ import annotations

import os
from collections.abc import Callable

import httpx
import pytest

from halcli.infra.daemon_client import DaemonClient

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingSink:
    """OutputSink that remembers every call as ``(level, line)``."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []

    def error(self, line: str) -> None:
        self.lines.append(("error", line))

    def warning(self, line: str) -> None:
        self.lines.append(("warning", line))

    def remediation(self, line: str) -> None:
        self.lines.append(("remediation", line))

    def success(self, line: str) -> None:
        self.lines.append(("success", line))

    def raw(self, line: str) -> None:
        self.lines.append(("raw", line))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: object) -> None:
    for key in list(os.environ):
        if key.upper().startswith("HAL_"):
            monkeypatch.delenv(key)
    # Keep a stray .env in the working directory out of the settings.
    monkeypatch.chdir(tmp_path)  # type: ignore[arg-type]


def make_client(handler: Handler) -> DaemonClient:
    return DaemonClient(
        "http://daemon.test",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def stub_daemon(monkeypatch: pytest.MonkeyPatch) -> Callable[[Handler], list[httpx.Request]]:
    """Route :func:`halcli.cli.app.main`'s daemon client to *handler*.

    Returns the list the handled requests are appended to.
    """

    def install(handler: Handler) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        monkeypatch.setattr(
            "halcli.cli.app._build_client",
            lambda settings: make_client(recording),
        )
        return seen

    return install
