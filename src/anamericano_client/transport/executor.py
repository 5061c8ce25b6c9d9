"""Request executor: one logical API call, end to end.

For each call the executor:

1. Encodes the request body to JSON bytes once; every attempt resends the
   same bytes.
2. Builds a fresh ``httpx.Request`` per attempt and lets the authenticator
   stamp it with the per-call ``RequestContext``.
3. Sends it, classifies the outcome with ``RetryPolicy``, and either returns
   the decoded result, raises a terminal error, or sleeps and tries again.

Cancellation is left to asyncio: cancelling the task (or an enclosing
``asyncio.timeout``) interrupts the token fetch, the backoff sleep or the
in-flight request, and the resulting ``CancelledError``/``TimeoutError``
reaches the caller untouched.

Example:
    ```python
    async with httpx.AsyncClient(timeout=30) as http_client:
        executor = RequestExecutor(
            http_client=http_client,
            base_url="https://accounts.ana.st",
            policy=RetryPolicy(max_retries=3, retry_delay=1.0),
            logger=logging.getLogger("anamericano_client"),
        )
        result = await executor.execute("GET", "/api/permissions/read/document/doc1")
    ```
"""

import asyncio
import json
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from anamericano_client.auth.authenticators import Authenticator
from anamericano_client.auth.context import ROOT_CONTEXT, RequestContext
from anamericano_client.errors.exceptions import (
    AnamericanoError,
    MalformedErrorBodyError,
    RetriesExhaustedError,
    SerializationError,
    TransportError,
)
from anamericano_client.errors.handler import error_from_response
from anamericano_client.log import Logger
from anamericano_client.transport.retry import RetryPolicy

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"


def encode_body(body: Any) -> bytes:
    """Serialize a request body to compact JSON bytes.

    Objects exposing ``to_dict()`` are converted first; anything else must be
    JSON-serializable as is.

    Raises:
        SerializationError: If the body cannot be encoded.
    """
    payload = body.to_dict() if hasattr(body, "to_dict") else body
    try:
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to marshal request body: {e}") from e


def decode_body(content: bytes, decode: Callable[[Any], T]) -> T:
    """Deserialize a success body and apply ``decode`` to the parsed JSON.

    Raises:
        SerializationError: If the body is not valid JSON or does not fit ``decode``.
    """
    try:
        return decode(json.loads(content))
    except (ValueError, TypeError, KeyError, AttributeError) as e:
        raise SerializationError(f"failed to unmarshal response: {e}") from e


class RequestExecutor:
    """Run requests against the permission service with retry and backoff.

    Args:
        http_client: Shared httpx client; its connection pool serves every call
        base_url: Service base URL, prepended to each request path
        policy: Attempt budget and backoff schedule
        logger: Logging sink
        timeout: Per-attempt timeout in seconds (default: the client's own)
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        base_url: str,
        policy: RetryPolicy,
        logger: Logger,
        timeout: float | None = None,
    ) -> None:
        self._http_client = http_client
        self._base_url = base_url
        self._policy = policy
        self._logger = logger
        self._timeout = timeout

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    async def execute(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        decode: Callable[[Any], T] | None = None,
        authenticator: Authenticator | None = None,
        context: RequestContext | None = None,
    ) -> T | None:
        """Execute one logical call, retrying transient failures.

        Args:
            method: HTTP method
            path: Request path, appended to the base URL
            body: Optional request body (``to_dict()`` object or JSON data)
            decode: Converts the parsed success body into the result
            authenticator: Stamps credentials on every attempt
            context: Per-call values passed to the authenticator

        Returns:
            The decoded result, or None if no decoder was given or the
            success body was empty

        Raises:
            AuthError: Credentials could not be stamped (never retried)
            SerializationError: Body could not be encoded or decoded
            APIError: Terminal 4xx response from the service
            MalformedErrorBodyError: Non-2xx response without a structured body
            RetriesExhaustedError: Every attempt failed with a retryable error
        """
        content = encode_body(body) if body is not None else None
        context = context if context is not None else ROOT_CONTEXT
        url = self._base_url + path
        last_error: AnamericanoError | None = None

        for attempt in range(self._policy.max_attempts):
            if attempt > 0:
                delay = self._policy.backoff_delay(attempt, last_error)
                self._logger.debug(
                    f"Retrying {method} {url} in {delay}s (attempt {attempt}/{self._policy.max_retries})"
                )
                await asyncio.sleep(delay)

            request = self._build_request(method, url, content)
            if authenticator is not None:
                await authenticator.authenticate(request, context)

            try:
                response = await self._http_client.send(request)
            except httpx.RequestError as e:
                last_error = TransportError(f"request {method} {url} failed: {e}")
                last_error.__cause__ = e
                self._logger.error(f"Request {method} {url} failed with {e!r} (attempt {attempt})")
                continue

            if response.is_success:
                if decode is None or not response.content:
                    return None
                return decode_body(response.content, decode)

            error = error_from_response(response)
            if isinstance(error, MalformedErrorBodyError):
                raise error

            if not self._policy.is_retryable(error):
                self._logger.error(f"Client error {error.status_code} on {method} {url}: {error.error_message}")
                raise error

            last_error = error
            self._logger.error(
                f"Request {method} {url} failed with {error.status_code}, will retry: {error.error_message}"
            )

        raise RetriesExhaustedError(last_error, attempts=self._policy.max_attempts) from last_error

    def _build_request(self, method: str, url: str, content: bytes | None) -> httpx.Request:
        headers = {"Content-Type": JSON_CONTENT_TYPE} if content is not None else None
        kwargs: dict[str, Any] = {}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        return self._http_client.build_request(method, url, content=content, headers=headers, **kwargs)

