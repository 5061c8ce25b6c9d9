"""Error taxonomy and response classification for the permission client."""

from anamericano_client.errors.exceptions import (
    AnamericanoError,
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    MalformedErrorBodyError,
    MissingFieldError,
    NotFoundError,
    RateLimitError,
    RetriesExhaustedError,
    SerializationError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from anamericano_client.errors.handler import error_from_response, parse_retry_after
from anamericano_client.errors.models import ErrorBody

__all__ = [
    "APIError",
    "AnamericanoError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ErrorBody",
    "ForbiddenError",
    "MalformedErrorBodyError",
    "MissingFieldError",
    "NotFoundError",
    "RateLimitError",
    "RetriesExhaustedError",
    "SerializationError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "error_from_response",
    "parse_retry_after",
]
