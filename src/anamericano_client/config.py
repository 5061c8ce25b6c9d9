"""Client configuration with field-by-field defaults."""

from dataclasses import dataclass, fields, replace

import httpx

from anamericano_client.log import Logger, default_logger

DEFAULT_BASE_URL = "https://accounts.ana.st"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_MAX_CONNECTIONS = 512
DEFAULT_MAX_IDLE_CONN_DURATION = 10.0

_NUMERIC_DEFAULTS = {
    "timeout": DEFAULT_TIMEOUT,
    "max_retries": DEFAULT_MAX_RETRIES,
    "retry_delay": DEFAULT_RETRY_DELAY,
    "max_connections": DEFAULT_MAX_CONNECTIONS,
    "max_idle_conn_duration": DEFAULT_MAX_IDLE_CONN_DURATION,
}


@dataclass(frozen=True)
class ClientOptions:
    """Configuration for ``PermissionClient``.

    Fields left as None (or set to zero) take their default when the client
    resolves the options, independently of the other fields.

    Args:
        timeout: Per-attempt request timeout in seconds (default 30)
        max_retries: Retries after the first attempt (default 3)
        retry_delay: Base backoff in seconds; attempt N waits N * retry_delay (default 1)
        logger: Logging sink (default: the ``anamericano_client`` stdlib logger)
        max_connections: Connection pool size (default 512)
        max_idle_conn_duration: Seconds an idle pooled connection is kept (default 10)
        base_url: Service base URL (default https://accounts.ana.st)
        respect_retry_after: Use the Retry-After header of 429 responses as
            the backoff delay instead of the linear schedule
    """

    timeout: float | None = None
    max_retries: int | None = None
    retry_delay: float | None = None
    logger: Logger | None = None
    max_connections: int | None = None
    max_idle_conn_duration: float | None = None
    base_url: str | None = None
    respect_retry_after: bool = False

    def resolved(self) -> "ClientOptions":
        """Return a copy with every absent or zero field replaced by its default.

        Raises:
            ValueError: If a numeric field is negative.
        """
        changes = {}
        for f in fields(self):
            if f.name not in _NUMERIC_DEFAULTS:
                continue
            value = getattr(self, f.name)
            if value is not None and value < 0:
                raise ValueError(f"{f.name} must not be negative, got {value}")
            if not value:
                changes[f.name] = _NUMERIC_DEFAULTS[f.name]

        if self.logger is None:
            changes["logger"] = default_logger()
        if not self.base_url:
            changes["base_url"] = DEFAULT_BASE_URL
        else:
            changes["base_url"] = self.base_url.rstrip("/")

        return replace(self, **changes)

    @property
    def limits(self) -> httpx.Limits:
        """Connection pool limits for the underlying httpx client."""
        return httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_connections,
            keepalive_expiry=self.max_idle_conn_duration,
        )
