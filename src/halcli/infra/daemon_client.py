"""httpx-backed client for the daemon's JSON API.

This module is the **only** place in the codebase that imports
``httpx``.  Transport failures are mapped at this boundary:

* a connection that cannot be established → :class:`UnreachableDaemonError`
* an HTTP error response → :class:`StructuredFailure` carrying the decoded
  problem set, or :class:`MalformedPayloadError` when the body is not one

Other httpx errors (read timeouts, protocol errors, …) are not
operational conditions and propagate unchanged.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from halcli.core.classifier import iter_exception_chain
from halcli.core.payload import problem_set_from_payload
from halcli.exceptions import MalformedPayloadError, StructuredFailure, UnreachableDaemonError
from halcli.version import __version__

logger = logging.getLogger(__name__)


class DaemonClient:
    """Synchronous JSON client for one daemon endpoint.

    Usage::

        with DaemonClient("http://localhost:8064", timeout=30.0) as client:
            deployment = client.get("/v1/config/currentDeployment")

    Parameters
    ----------
    endpoint:
        Base URL of the daemon.
    timeout:
        Per-request timeout in seconds.
    transport:
        Optional httpx transport, used by tests to stub the daemon.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.endpoint: str = endpoint
        self._client = httpx.Client(
            base_url=endpoint,
            timeout=httpx.Timeout(timeout),
            headers={
                "Accept": "application/json",
                "User-Agent": f"halcli/{__version__}",
            },
            transport=transport,
        )

    def __enter__(self) -> DaemonClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self, path: str, **params: Any) -> Any:
        return self._request("GET", path, params=params)

    def put(self, path: str, body: Any, **params: Any) -> Any:
        return self._request("PUT", path, body=body, params=params)

    def post(self, path: str, body: Any = None, **params: Any) -> Any:
        return self._request("POST", path, body=body, params=params)

    # ------------------------------------------------------------------
    # Request + exception mapping
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        logger.debug("%s %s%s params=%s", method, self.endpoint, path, params)
        try:
            response = self._client.request(
                method,
                path,
                json=body,
                params=_encode_params(params),
            )
            response.raise_for_status()
        except (httpx.ConnectError, httpx.ConnectTimeout) as exc:
            raise UnreachableDaemonError(self._unreachable_message(exc)) from exc
        except httpx.HTTPStatusError as exc:
            raise self._structured_failure(exc.response) from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return _decode_body(response)

    def _unreachable_message(self, exc: httpx.TransportError) -> str:
        # "[Errno 111] Connection refused" -> "Connection refused"
        for link in iter_exception_chain(exc):
            if isinstance(link, OSError) and link.strerror:
                return link.strerror
        return str(exc) or f"Could not connect to {self.endpoint}"

    @staticmethod
    def _structured_failure(response: httpx.Response) -> StructuredFailure:
        payload = _decode_body(response)
        problem_set = problem_set_from_payload(payload)
        logger.debug(
            "daemon rejected request with %d problem(s), worst=%s",
            len(problem_set),
            problem_set.max_severity(),
        )
        return StructuredFailure(
            problem_set,
            message=f"The daemon rejected the request (HTTP {response.status_code}).",
        )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise MalformedPayloadError(
            f"The daemon returned a non-JSON response (HTTP {response.status_code}).",
        ) from exc


def _encode_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Render booleans the way the daemon's query parser expects them."""
    if not params:
        return None
    return {
        key: ("true" if value else "false") if isinstance(value, bool) else value
        for key, value in params.items()
    }
