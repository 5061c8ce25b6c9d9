"""Error handling utilities for HTTP responses."""

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

from anamericano_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    MalformedErrorBodyError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)
from anamericano_client.errors.models import ErrorBody

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def error_from_response(response: httpx.Response) -> APIError | MalformedErrorBodyError:
    """Build the exception describing a non-2xx response.

    The exception is returned, not raised, so the caller can decide whether
    the failure is worth another attempt.

    Args:
        response: HTTP response object with a non-2xx status

    Returns:
        APIError subclass chosen by status code, or MalformedErrorBodyError
        if the body is not a structured error document
    """
    status_code = response.status_code
    error_body = ErrorBody.from_response(response)
    if error_body is None:
        return MalformedErrorBodyError(status_code, response.text)

    # Determine exception class
    if status_code in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    message = error_body.to_exception_message(status_code)

    if exc_class is RateLimitError:
        return RateLimitError(
            message=message,
            retry_after=parse_retry_after(response),
            status_code=status_code,
            response=response,
            error_body=error_body,
        )

    return exc_class(
        message=message,
        status_code=status_code,
        response=response,
        error_body=error_body,
    )


def parse_retry_after(response: httpx.Response) -> float | None:
    """Parse Retry-After header from response.

    Supports both formats:
    - Delay-seconds: "120" (integer seconds)
    - HTTP-date: "Wed, 21 Oct 2015 07:28:00 GMT"

    Args:
        response: HTTP response with optional Retry-After header

    Returns:
        Delay in seconds, or None if header is missing or invalid
    """
    retry_after = response.headers.get("Retry-After")
    if not retry_after:
        return None

    # Try parsing as integer (delay-seconds format)
    try:
        delay = int(retry_after)
        if delay < 0:
            return None
        return float(delay)
    except ValueError:
        pass

    # Try parsing as HTTP-date format
    try:
        retry_date = parsedate_to_datetime(retry_after)
        delay = (retry_date - datetime.now(UTC)).total_seconds()

        # Clock skew
        if delay < 0:
            return None

        return delay
    except (ValueError, TypeError):
        return None
