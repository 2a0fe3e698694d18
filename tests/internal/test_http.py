"""Tests for create_http_client."""

from lambda_cloud_sdk._internal.http import create_http_client
from lambda_cloud_sdk._version import __version__


class TestCreateHttpClient:
    """Tests for create_http_client function."""

    def test_sets_user_agent(self):
        """Should identify the SDK in the User-Agent header."""
        with create_http_client() as client:
            assert client.headers["user-agent"] == f"lambda-cloud-sdk/{__version__}"

    def test_no_timeout_by_default(self):
        """Requests should not time out unless the caller asks for it."""
        with create_http_client() as client:
            assert client.timeout.read is None
            assert client.timeout.connect is None

    def test_custom_timeout(self):
        """Should apply a caller-supplied timeout."""
        with create_http_client(timeout=5.0) as client:
            assert client.timeout.read == 5.0
