"""Structured exceptions for permission API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from anamericano_client.errors.models import ErrorBody


class AnamericanoError(Exception):
    """Base exception for every error raised by the client."""

    pass


class MissingFieldError(AnamericanoError, ValueError):
    """Raised when a domain request is missing a required field.

    Attributes:
        field: Wire name of the missing field (e.g. ``objectNamespace``).
    """

    def __init__(self, field: str):
        super().__init__(f"{field} is required")
        self.field = field


class SerializationError(AnamericanoError):
    """Request body could not be encoded, or a success body could not be decoded."""

    pass


class TransportError(AnamericanoError):
    """Network, connection or timeout failure while reaching the server."""

    pass


class APIError(AnamericanoError):
    """Structured error returned by the permission service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error_body: "ErrorBody | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error_body = error_body

    @property
    def timestamp(self) -> str | None:
        return self.error_body.timestamp if self.error_body else None

    @property
    def error_type(self) -> str | None:
        return self.error_body.error if self.error_body else None

    @property
    def error_message(self) -> str | None:
        return self.error_body.message if self.error_body else None

    @property
    def path(self) -> str | None:
        return self.error_body.path if self.error_body else None

    def is_permission_denied(self) -> bool:
        return self.status_code == 403

    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    def is_not_found(self) -> bool:
        return self.status_code == 404

    def is_bad_request(self) -> bool:
        return self.status_code == 400


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden (permission denied)."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: float | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass


class MalformedErrorBodyError(AnamericanoError):
    """Non-2xx response whose body is not a structured error document.

    Attributes:
        status_code: HTTP status of the response.
        body: Raw response body text.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class RetriesExhaustedError(AnamericanoError):
    """Raised when every attempt failed with a retryable error.

    Attributes:
        last_error: The error recorded on the final attempt.
        attempts: Number of attempts made.
    """

    def __init__(self, last_error: AnamericanoError, attempts: int):
        super().__init__(f"max retries exceeded after {attempts} attempts: {last_error}")
        self.last_error = last_error
        self.attempts = attempts
