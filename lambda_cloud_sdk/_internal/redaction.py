"""Redaction of secrets from request and response bodies before debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "token",
    "secret",
    "password",
    "authorization",
    "private_key",
    "jupyter_token",
    "jupyter_url",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a decoded JSON body.

    Creates a copy - the original payload is never mutated.

    Args:
        payload: Decoded JSON (dict, list or scalar).

    Returns:
        A new object with sensitive values replaced by "[REDACTED]".
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload
