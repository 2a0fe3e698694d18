"""Tests for redaction logic."""

from lambda_cloud_sdk._internal.redaction import REDACTED_VALUE, redact_payload


class TestRedactPayload:
    """Tests for redact_payload function."""

    def test_redacts_private_key(self):
        """Should redact a generated private key."""
        payload = {"id": "1", "name": "k", "private_key": "-----BEGIN"}
        result = redact_payload(payload)
        assert result["private_key"] == REDACTED_VALUE
        assert result["name"] == "k"

    def test_redacts_jupyter_credentials(self):
        """Should redact Jupyter token and URL of instances."""
        payload = {"id": "i-1", "jupyter_token": "abc", "jupyter_url": "https://x?token=abc"}
        result = redact_payload(payload)
        assert result["jupyter_token"] == REDACTED_VALUE
        assert result["jupyter_url"] == REDACTED_VALUE
        assert result["id"] == "i-1"

    def test_redacts_in_lists(self):
        """Should redact sensitive keys in list items."""
        payload = [{"api_key": "k1"}, {"name": "visible"}]
        result = redact_payload(payload)
        assert result[0]["api_key"] == REDACTED_VALUE
        assert result[1]["name"] == "visible"

    def test_redacts_nested_dicts(self):
        """Should redact sensitive keys in nested dicts."""
        payload = {"terminated_instances": [{"id": "i-1", "jupyter_token": "abc"}]}
        result = redact_payload(payload)
        assert result["terminated_instances"][0]["jupyter_token"] == REDACTED_VALUE

    def test_case_insensitive(self):
        """Key matching should ignore case."""
        assert redact_payload({"Authorization": "Bearer x"})["Authorization"] == REDACTED_VALUE

    def test_does_not_mutate_original(self):
        """The original payload should not be modified."""
        payload = {"private_key": "secret", "nested": {"token": "t"}}
        redact_payload(payload)
        assert payload == {"private_key": "secret", "nested": {"token": "t"}}

    def test_scalars_pass_through(self):
        """Non-container values should be returned as-is."""
        assert redact_payload("text") == "text"
        assert redact_payload(None) is None
