"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed without error."""

OPERATION_FAILED: int = 1
"""The daemon was unreachable or rejected the request, or a known
HalcliError was caught.  A user-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An internal error escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
