"""Structured error body returned by the permission service."""

import json
from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class ErrorBody:
    """Error document of the form ``{timestamp, status, error, message, path}``.

    Every field is optional on the wire; a missing field decodes to None, and
    a JSON ``null`` body decodes to an empty document.
    """

    timestamp: str | None = None  # Server time the error occurred
    status: int | None = None  # HTTP status echoed by the server
    error: str | None = None  # Short error type (e.g. "Forbidden")
    message: str | None = None  # Human-readable explanation
    path: str | None = None  # Request path that failed

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorBody | None":
        """Parse an error body from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorBody, or None if the body is not a well-formed error document
        """
        return cls.from_bytes(response.content)

    @classmethod
    def from_bytes(cls, content: bytes) -> "ErrorBody | None":
        try:
            data = json.loads(content)
        except (ValueError, TypeError):
            # Empty body, invalid JSON or undecodable bytes
            return None

        if data is None:
            return cls()
        if not isinstance(data, dict):
            return None

        status = data.get("status")
        if status is not None and (isinstance(status, bool) or not isinstance(status, int)):
            return None

        text_fields = {}
        for name in ("timestamp", "error", "message", "path"):
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                return None
            text_fields[name] = value

        return cls(status=status, **text_fields)

    def to_exception_message(self, status_code: int) -> str:
        """Convert the error body to an exception message."""
        return f"API error {status_code}: {self.error or ''} - {self.message or ''} (path: {self.path or ''})"
