"""Tests for the structured error body model."""

import pytest
from httpx import Response

from anamericano_client.errors.models import ErrorBody


@pytest.mark.unit
def test_parse_error_body_response():
    """Test parsing a structured error response."""
    response = Response(
        status_code=403,
        json={
            "timestamp": "2024-01-01T00:00:00Z",
            "status": 403,
            "error": "Forbidden",
            "message": "Access denied",
            "path": "/api/permissions/check",
        },
    )

    body = ErrorBody.from_response(response)

    assert body is not None
    assert body.timestamp == "2024-01-01T00:00:00Z"
    assert body.status == 403
    assert body.error == "Forbidden"
    assert body.message == "Access denied"
    assert body.path == "/api/permissions/check"


@pytest.mark.unit
def test_parse_partial_error_body():
    """Test that missing fields decode to None."""
    response = Response(status_code=500, json={"message": "boom"})

    body = ErrorBody.from_response(response)

    assert body is not None
    assert body.message == "boom"
    assert body.status is None
    assert body.path is None


@pytest.mark.unit
def test_unknown_fields_are_ignored():
    """Test that extra members do not prevent decoding."""
    response = Response(status_code=400, json={"error": "Bad Request", "trace": "abc"})

    body = ErrorBody.from_response(response)

    assert body is not None
    assert body.error == "Bad Request"


@pytest.mark.unit
@pytest.mark.parametrize(
    "content",
    [
        b"",
        b"Internal Server Error",
        b"<html>502</html>",
        b"[1, 2, 3]",
        b'"just a string"',
        b'{"status": "forbidden"}',
        b'{"status": true}',
        b'{"message": 42}',
    ],
)
def test_malformed_bodies_return_none(content):
    """Test that non-documents and wrongly typed fields are rejected."""
    assert ErrorBody.from_bytes(content) is None


@pytest.mark.unit
def test_to_exception_message():
    """Test message format."""
    body = ErrorBody(error="Forbidden", message="Access denied", path="/api/test")

    assert body.to_exception_message(403) == "API error 403: Forbidden - Access denied (path: /api/test)"


@pytest.mark.unit
def test_error_body_is_immutable():
    """Test that a parsed error body cannot be modified."""
    body = ErrorBody(status=404)

    with pytest.raises(AttributeError):
        body.status = 500


@pytest.mark.unit
def test_null_body_is_empty_document():
    """Test that a JSON null body decodes to an empty error body."""
    body = ErrorBody.from_bytes(b"null")

    assert body == ErrorBody()
    assert body.to_exception_message(503) == "API error 503:  -  (path: )"
