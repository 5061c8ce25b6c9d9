"""Pytest configuration and shared fixtures for anamericano-client tests."""

import pytest

from anamericano_client.models import PermissionCheckRequest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing token resolution.
    """
    import os

    # Store keys that look like test-related env vars
    test_prefixes = ("TEST_", "ANAMERICANO_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def check_request():
    """A valid permission check request."""
    return PermissionCheckRequest(
        subject_type="user",
        subject_id="hanul",
        relation="viewer",
        object_namespace="document",
        object_id="doc1",
    )
