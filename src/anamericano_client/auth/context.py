"""Per-call request context handed to authenticators."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class RequestContext:
    """Request-scoped values threaded explicitly through one logical call.

    Authenticators receive the context as an argument on every attempt, so
    one authenticator instance can serve concurrent calls with different
    contexts.

    Attributes:
        token: Bearer token carried for ``ContextTokenAuth``.
        metadata: Free-form values for custom token providers.
    """

    token: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


ROOT_CONTEXT = RequestContext()


def with_token(context: RequestContext | None, token: str) -> RequestContext:
    """Return a copy of ``context`` carrying ``token``."""
    return replace(context or ROOT_CONTEXT, token=token)
