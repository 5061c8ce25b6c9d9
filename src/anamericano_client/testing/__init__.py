"""Testing utilities for code built on the permission client.

Provides response factories and a scripted ``httpx.MockTransport`` handler
that records every request it receives.

Example:
    ```python
    from anamericano_client.testing import ScriptedHandler, create_error_response, create_json_response


    async def test_retries_then_succeeds():
        handler = ScriptedHandler(
            [create_error_response(503), create_json_response({"allowed": True})]
        )
        client = PermissionClient(
            BearerTokenAuth("t"),
            ClientOptions(retry_delay=0.001),
            transport=handler.transport(),
        )
        resp = await client.check_permission(req)
        assert resp.allowed
        assert len(handler.requests) == 2
    ```
"""

import json
from collections.abc import Iterable
from typing import Any

import httpx

ERROR_REASONS = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    409: "Conflict",
    429: "Too Many Requests",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
}


def create_json_response(data: Any, status_code: int = 200, headers: dict[str, str] | None = None) -> httpx.Response:
    """Build a JSON response."""
    return httpx.Response(status_code, json=data, headers=headers)


def create_error_response(
    status_code: int,
    message: str = "error",
    *,
    path: str = "/api/permissions/check",
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build a structured service error response."""
    body = {
        "timestamp": "2024-01-01T00:00:00Z",
        "status": status_code,
        "error": ERROR_REASONS.get(status_code, "Error"),
        "message": message,
        "path": path,
    }
    return httpx.Response(status_code, content=json.dumps(body).encode(), headers=headers)


class ScriptedHandler:
    """MockTransport handler that replays scripted outcomes in order.

    Each item is an ``httpx.Response`` to return or an exception to raise.
    The last item repeats once the script runs out.

    Attributes:
        requests: Every request received, in order.
    """

    def __init__(self, outcomes: Iterable[httpx.Response | Exception]):
        self._outcomes = list(outcomes)
        if not self._outcomes:
            raise ValueError("ScriptedHandler needs at least one outcome")
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        index = min(len(self.requests), len(self._outcomes) - 1)
        self.requests.append(request)
        outcome = self._outcomes[index]
        if isinstance(outcome, Exception):
            raise outcome
        # Fresh copy so a repeated outcome can be read more than once
        return httpx.Response(outcome.status_code, headers=outcome.headers, content=outcome.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


__all__ = ["ScriptedHandler", "create_error_response", "create_json_response"]
