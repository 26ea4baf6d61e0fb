"""Infrastructure layer — the HTTP transport to the daemon.

Every raw ``httpx`` connection or status error is caught here and
re-raised as a :class:`~halcli.exceptions.HalcliError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from halcli.infra.daemon_client import DaemonClient

__all__: list[str] = ["DaemonClient"]
