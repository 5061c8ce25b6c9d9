"""Credential strategies that stamp an ``Authorization`` header onto requests.

Every strategy follows the same contract: on success it sets exactly one
header, ``Authorization: Bearer <token>``; on failure it raises an
``AuthError`` subclass and leaves the request untouched.

Strategies:
- ``BearerTokenAuth``: fixed bearer token
- ``OAuthTokenAuth``: fixed OAuth access token
- ``DynamicTokenAuth``: token fetched from a ``TokenProvider`` on every attempt
- ``ContextTokenAuth``: token carried by the per-call ``RequestContext``

Example:
    ```python
    from anamericano_client.auth import DynamicTokenAuth


    class VaultTokenProvider:
        async def get_token(self, context):
            return await vault.read("permissions-api-token")


    auth = DynamicTokenAuth(VaultTokenProvider())
    ```
"""

import inspect
from collections.abc import Awaitable
from typing import Protocol, runtime_checkable

import httpx

from anamericano_client.auth.context import ROOT_CONTEXT, RequestContext
from anamericano_client.auth.exceptions import (
    EmptyTokenError,
    MissingContextTokenError,
    TokenProviderError,
)

AUTHORIZATION_HEADER = "Authorization"


@runtime_checkable
class Authenticator(Protocol):
    """Capability that stamps credentials onto an outbound request."""

    async def authenticate(self, request: httpx.Request, context: RequestContext | None) -> None: ...


@runtime_checkable
class TokenProvider(Protocol):
    """Source of bearer tokens for ``DynamicTokenAuth``.

    ``get_token`` may be a plain or a coroutine function. It may perform
    network or database I/O; the client's per-request timeout is the only
    bound on how long an attempt waits for it.
    """

    def get_token(self, context: RequestContext) -> str | Awaitable[str]: ...


def _stamp(request: httpx.Request, token: str) -> None:
    request.headers[AUTHORIZATION_HEADER] = f"Bearer {token}"


class BearerTokenAuth:
    """Static bearer token authentication.

    Args:
        token: Bearer token value
    """

    def __init__(self, token: str) -> None:
        self.token = token

    def __repr__(self) -> str:
        return "BearerTokenAuth(token=***)"

    async def authenticate(self, request: httpx.Request, context: RequestContext | None = None) -> None:
        if not self.token:
            raise EmptyTokenError("bearer token is empty", source="BearerTokenAuth")
        _stamp(request, self.token)


class OAuthTokenAuth:
    """Static OAuth access token authentication.

    Produces the same header as ``BearerTokenAuth``; kept as its own type so
    callers can tell the credential kinds apart.

    Args:
        access_token: OAuth access token value
    """

    def __init__(self, access_token: str) -> None:
        self.access_token = access_token

    def __repr__(self) -> str:
        return "OAuthTokenAuth(access_token=***)"

    async def authenticate(self, request: httpx.Request, context: RequestContext | None = None) -> None:
        if not self.access_token:
            raise EmptyTokenError("oauth access token is empty", source="OAuthTokenAuth")
        _stamp(request, self.access_token)


class DynamicTokenAuth:
    """Authentication with a token fetched from a provider on every attempt.

    Args:
        provider: Token provider implementation

    Raises:
        TokenProviderError: If the provider raises.
        EmptyTokenError: If the provider returns an empty token.
    """

    def __init__(self, provider: TokenProvider) -> None:
        self.provider = provider

    async def authenticate(self, request: httpx.Request, context: RequestContext | None = None) -> None:
        context = context if context is not None else ROOT_CONTEXT

        try:
            token = self.provider.get_token(context)
            if inspect.isawaitable(token):
                token = await token
        except Exception as e:
            raise TokenProviderError(f"failed to get token from provider: {e}") from e

        if not token or not isinstance(token, str):
            raise EmptyTokenError("token provider returned an empty token", source=type(self.provider).__name__)
        _stamp(request, token)


class ContextTokenAuth:
    """Authentication with the token carried by the per-call ``RequestContext``.

    Example:
        ```python
        client = PermissionClient(ContextTokenAuth())
        ctx = with_token(None, user_session.token)
        await client.check_permission(req, context=ctx)
        ```
    """

    async def authenticate(self, request: httpx.Request, context: RequestContext | None = None) -> None:
        if context is None:
            raise MissingContextTokenError("request context is missing")
        token = context.token
        if not token or not isinstance(token, str):
            raise MissingContextTokenError("no token found in request context")
        _stamp(request, token)
