"""Base client for the permission service."""

from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from anamericano_client.auth.authenticators import Authenticator
from anamericano_client.auth.context import RequestContext
from anamericano_client.config import ClientOptions
from anamericano_client.transport.executor import RequestExecutor
from anamericano_client.transport.retry import RetryPolicy

T = TypeVar("T")


class BaseClient:
    """Owns configuration, the active authenticator and the HTTP connection pool.

    Service operations live in subclasses (see ``PermissionClient``) and go
    through ``request``.

    The active authenticator is read once when a call starts, so ``set_auth``
    only affects calls issued afterwards. For per-user credentials prefer
    passing ``auth=`` or a ``RequestContext`` per call over swapping the
    shared authenticator.

    Args:
        auth: Authenticator consulted on every attempt (None sends no credentials)
        options: Client options; absent fields take their defaults
        transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests)

    Example:
        ```python
        async with PermissionClient(BearerTokenAuth("token")) as client:
            resp = await client.check_permission(req)
        ```
    """

    def __init__(
        self,
        auth: Authenticator | None = None,
        options: ClientOptions | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._options = (options or ClientOptions()).resolved()
        self._auth = auth
        self._http_client = httpx.AsyncClient(
            transport=transport,
            timeout=self._options.timeout,
            limits=self._options.limits,
        )
        self._executor = RequestExecutor(
            http_client=self._http_client,
            base_url=self._options.base_url,
            policy=RetryPolicy(
                max_retries=self._options.max_retries,
                retry_delay=self._options.retry_delay,
                respect_retry_after=self._options.respect_retry_after,
            ),
            logger=self._options.logger,
            timeout=self._options.timeout,
        )

    @property
    def auth(self) -> Authenticator | None:
        return self._auth

    @property
    def options(self) -> ClientOptions:
        return self._options

    def set_auth(self, auth: Authenticator | None) -> None:
        """Replace the active authenticator for subsequent calls."""
        self._auth = auth

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        decode: Callable[[Any], T] | None = None,
        context: RequestContext | None = None,
        auth: Authenticator | None = None,
    ) -> T | None:
        """Send one logical request through the retrying executor.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            body: Optional JSON body
            decode: Converts the parsed success body into the result
            context: Per-call values passed to the authenticator
            auth: Authenticator for this call only, overriding the active one
        """
        authenticator = auth if auth is not None else self._auth
        return await self._executor.execute(
            method,
            path,
            body=body,
            decode=decode,
            authenticator=authenticator,
            context=context,
        )

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http_client.aclose()

    async def __aenter__(self):
        await self._http_client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._http_client.__aexit__(exc_type, exc_val, exc_tb)
