"""Tests for error handling utilities."""

from datetime import UTC, datetime, timedelta
from email.utils import format_datetime

import pytest
from httpx import Response

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
from anamericano_client.errors.handler import error_from_response, parse_retry_after
from anamericano_client.testing import create_error_response


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status", "exc_class"),
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (429, RateLimitError),
    ],
)
def test_mapped_status_codes(status, exc_class):
    """Test that known status codes map to their specific exception."""
    response = create_error_response(status, "nope")

    error = error_from_response(response)

    assert type(error) is exc_class
    assert error.status_code == status
    assert error.response is response
    assert error.error_message == "nope"


@pytest.mark.unit
def test_unmapped_client_error():
    """Test that other 4xx codes produce a generic ClientError."""
    error = error_from_response(create_error_response(418, "teapot"))

    assert type(error) is ClientError
    assert error.status_code == 418


@pytest.mark.unit
@pytest.mark.parametrize("status", [500, 502, 503, 504])
def test_server_errors(status):
    """Test that 5xx codes produce ServerError."""
    error = error_from_response(create_error_response(status))

    assert type(error) is ServerError
    assert error.status_code == status


@pytest.mark.unit
def test_unexpected_status_is_generic_api_error():
    """Test that a non-error status with an error body yields APIError."""
    error = error_from_response(create_error_response(302))

    assert type(error) is APIError


@pytest.mark.unit
def test_error_message_includes_body_fields():
    """Test the message built from a structured body."""
    response = create_error_response(403, "Access denied", path="/api/permissions/check")

    error = error_from_response(response)

    assert str(error) == "API error 403: Forbidden - Access denied (path: /api/permissions/check)"
    assert error.is_permission_denied()
    assert error.timestamp == "2024-01-01T00:00:00Z"


@pytest.mark.unit
def test_status_code_comes_from_response_not_body():
    """Test that the HTTP status wins over a disagreeing body status."""
    response = Response(status_code=404, json={"status": 500, "error": "Not Found", "message": "gone"})

    error = error_from_response(response)

    assert isinstance(error, NotFoundError)
    assert error.status_code == 404
    assert error.error_body.status == 500


@pytest.mark.unit
@pytest.mark.parametrize(
    "content",
    [b"", b"Service Unavailable", b"[]", b'{"status": "bad"}'],
)
def test_malformed_body(content):
    """Test that an unparsable body yields MalformedErrorBodyError."""
    response = Response(status_code=503, content=content)

    error = error_from_response(response)

    assert isinstance(error, MalformedErrorBodyError)
    assert error.status_code == 503
    assert error.body == content.decode()


@pytest.mark.unit
def test_rate_limit_error_with_retry_after():
    """Test that RateLimitError carries the Retry-After delay."""
    response = create_error_response(429, "slow down", headers={"Retry-After": "7"})

    error = error_from_response(response)

    assert isinstance(error, RateLimitError)
    assert error.retry_after == 7.0


@pytest.mark.unit
def test_rate_limit_error_without_retry_after():
    """Test that a missing Retry-After header leaves retry_after unset."""
    error = error_from_response(create_error_response(429))

    assert isinstance(error, RateLimitError)
    assert error.retry_after is None


class TestParseRetryAfter:
    """Test Retry-After header parsing."""

    @pytest.mark.unit
    def test_missing_header(self):
        """No header means no delay."""
        assert parse_retry_after(Response(429)) is None

    @pytest.mark.unit
    def test_delay_seconds(self):
        """Integer seconds are returned as a float."""
        assert parse_retry_after(Response(429, headers={"Retry-After": "120"})) == 120.0

    @pytest.mark.unit
    def test_negative_delay_seconds(self):
        """Negative seconds are rejected."""
        assert parse_retry_after(Response(429, headers={"Retry-After": "-5"})) is None

    @pytest.mark.unit
    def test_http_date_in_future(self):
        """An HTTP-date in the future yields the remaining seconds."""
        future = datetime.now(UTC) + timedelta(seconds=60)
        header = format_datetime(future, usegmt=True)

        delay = parse_retry_after(Response(429, headers={"Retry-After": header}))

        assert delay is not None
        assert 50 <= delay <= 60

    @pytest.mark.unit
    def test_http_date_in_past(self):
        """An HTTP-date in the past is treated as clock skew."""
        header = "Wed, 21 Oct 2015 07:28:00 GMT"

        assert parse_retry_after(Response(429, headers={"Retry-After": header})) is None

    @pytest.mark.unit
    def test_garbage_value(self):
        """Unparsable values are ignored."""
        assert parse_retry_after(Response(429, headers={"Retry-After": "soon"})) is None


@pytest.mark.unit
def test_null_body_is_classified_by_status():
    """Test that a null body still yields the status-mapped error."""
    error = error_from_response(Response(status_code=503, content=b"null"))

    assert type(error) is ServerError
    assert error.status_code == 503
    assert error.error_message is None
