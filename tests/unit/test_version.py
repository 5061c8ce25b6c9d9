"""Test basic package functionality."""

import anamericano_client


def test_version():
    """Test that package version is defined."""
    assert hasattr(anamericano_client, "__version__")
    assert anamericano_client.__version__ == "0.1.0"
