"""Rich-backed output sink.

Lines are wrapped in :class:`rich.text.Text` so daemon messages that
happen to contain ``[brackets]`` are never parsed as console markup.
Whether colors are used is decided once, when the console is built.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from halcli.core.severity import SinkLevel

_STYLES: dict[SinkLevel, str] = {
    SinkLevel.ERROR: "bold red",
    SinkLevel.WARNING: "yellow",
    SinkLevel.REMEDIATION: "cyan",
    SinkLevel.SUCCESS: "bold green",
    SinkLevel.RAW: "",
}


def build_console(*, color: bool, stderr: bool = False) -> Console:
    """Create a console; ``color=False`` disables all ANSI styling."""
    return Console(
        stderr=stderr,
        color_system="auto" if color else None,
        highlight=False,
        soft_wrap=True,
    )


class ConsoleSink:
    """:class:`~halcli.core.protocols.OutputSink` writing to a Rich console."""

    def __init__(self, console: Console) -> None:
        self.console: Console = console

    def emit(self, level: SinkLevel, line: str) -> None:
        self.console.print(Text(line, style=_STYLES[level]))

    def error(self, line: str) -> None:
        self.emit(SinkLevel.ERROR, line)

    def warning(self, line: str) -> None:
        self.emit(SinkLevel.WARNING, line)

    def remediation(self, line: str) -> None:
        self.emit(SinkLevel.REMEDIATION, line)

    def success(self, line: str) -> None:
        self.emit(SinkLevel.SUCCESS, line)

    def raw(self, line: str) -> None:
        self.emit(SinkLevel.RAW, line)
