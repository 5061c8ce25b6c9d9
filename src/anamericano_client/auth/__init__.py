"""Authentication components for the permission client.

This module provides:
- Four interchangeable credential strategies behind the ``Authenticator`` protocol
- An explicit per-call ``RequestContext``
- Multi-source token resolution (value → env → .env → file → default)

Example:
    ```python
    from anamericano_client.auth import BearerTokenAuth

    client = PermissionClient(BearerTokenAuth("my-token"))
    ```
"""

from anamericano_client.auth.authenticators import (
    Authenticator,
    BearerTokenAuth,
    ContextTokenAuth,
    DynamicTokenAuth,
    OAuthTokenAuth,
    TokenProvider,
)
from anamericano_client.auth.context import ROOT_CONTEXT, RequestContext, with_token
from anamericano_client.auth.credentials import CredentialTokenProvider
from anamericano_client.auth.exceptions import (
    AuthError,
    CredentialFileError,
    CredentialNotFoundError,
    EmptyTokenError,
    MissingContextTokenError,
    TokenProviderError,
)

__all__ = [
    "ROOT_CONTEXT",
    "AuthError",
    "Authenticator",
    "BearerTokenAuth",
    "ContextTokenAuth",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialTokenProvider",
    "DynamicTokenAuth",
    "EmptyTokenError",
    "MissingContextTokenError",
    "OAuthTokenAuth",
    "RequestContext",
    "TokenProvider",
    "TokenProviderError",
    "with_token",
]
