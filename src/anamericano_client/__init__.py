"""An-Americano client - asyncio client for the An-Americano permission service.

The service is a relationship-based (Zanzibar-style) permission store. This
library provides:
- Check, write, delete, read, expand and list-objects operations
- Pluggable credential strategies (static, OAuth, provider-fetched, per-call context)
- Retry with linear backoff for transport failures, 5xx and 429 responses
- A structured error taxonomy for deciding how to react to failures

Example:
    ```python
    from anamericano_client import BearerTokenAuth, PermissionCheckRequest, PermissionClient

    async with PermissionClient(BearerTokenAuth("my-token")) as client:
        resp = await client.check_permission(
            PermissionCheckRequest(
                subject_type="user",
                subject_id="hanul",
                relation="viewer",
                object_namespace="document",
                object_id="doc1",
            )
        )
    ```
"""

from anamericano_client.auth import (
    AuthError,
    BearerTokenAuth,
    ContextTokenAuth,
    CredentialTokenProvider,
    DynamicTokenAuth,
    OAuthTokenAuth,
    RequestContext,
    with_token,
)
from anamericano_client.client import BaseClient
from anamericano_client.config import ClientOptions
from anamericano_client.errors import (
    AnamericanoError,
    APIError,
    MalformedErrorBodyError,
    MissingFieldError,
    RetriesExhaustedError,
    SerializationError,
    TransportError,
)
from anamericano_client.log import NULL_LOGGER, NullLogger
from anamericano_client.models import (
    ListObjectsRequest,
    Permission,
    PermissionCheckRequest,
    PermissionCheckResponse,
    PermissionDeleteRequest,
    PermissionExpandRequest,
    PermissionReadRequest,
    PermissionWriteRequest,
)
from anamericano_client.permissions import PermissionClient

__version__ = "0.1.0"

__all__ = [
    "NULL_LOGGER",
    "APIError",
    "AnamericanoError",
    "AuthError",
    "BaseClient",
    "BearerTokenAuth",
    "ClientOptions",
    "ContextTokenAuth",
    "CredentialTokenProvider",
    "DynamicTokenAuth",
    "ListObjectsRequest",
    "MalformedErrorBodyError",
    "MissingFieldError",
    "NullLogger",
    "OAuthTokenAuth",
    "Permission",
    "PermissionCheckRequest",
    "PermissionCheckResponse",
    "PermissionClient",
    "PermissionDeleteRequest",
    "PermissionExpandRequest",
    "PermissionReadRequest",
    "PermissionWriteRequest",
    "RequestContext",
    "RetriesExhaustedError",
    "SerializationError",
    "TransportError",
    "__version__",
    "with_token",
]
