"""Request dispatch for the Lambda Cloud API.

Every API operation goes through `fetch()`, which sends the request and turns
the response into either the typed payload or a raised exception.
"""

import json
import sys
from typing import Any, Literal

import httpx
from pydantic import TypeAdapter, ValidationError

from lambda_cloud_sdk._internal.redaction import redact_payload
from lambda_cloud_sdk.configuration import Configuration
from lambda_cloud_sdk.exceptions import (
    LambdaAPIError,
    LambdaConnectionError,
    LambdaValidationError,
)
from lambda_cloud_sdk.models.errors import Error, ErrorCode, ErrorResponse

HttpMethod = Literal["GET", "POST", "DELETE"]

# Successful responses wrap the payload: {"data": <payload>}
ENVELOPE_KEY = "data"


def _log_debug(debug: bool, message: str) -> None:
    """Log a debug message to stderr if debug mode is enabled."""
    if debug:
        print(f"[lambda-cloud-sdk] {message}", file=sys.stderr)


def fetch(
    http_client: httpx.Client,
    config: Configuration,
    route: str,
    method: HttpMethod,
    body: str | None = None,
    *,
    response_model: TypeAdapter[Any] | None = None,
    debug: bool = False,
) -> Any:
    """Send one API request and classify the response.

    Args:
        http_client: Transport used to send the request.
        config: Base path and API key.
        route: Path appended to config.base_path (e.g. "/instances").
        method: HTTP method.
        body: Pre-serialized JSON request body.
        response_model: Adapter used to validate the payload. When omitted
            the decoded payload is returned as-is.
        debug: Write request/response traces to stderr.

    Returns:
        The validated payload, or None for DELETE requests and 204 responses.

    Raises:
        LambdaAPIError: The API answered with a non-2xx status.
        LambdaConnectionError: The request never got a response.
        LambdaValidationError: A 2xx response body could not be decoded.
    """
    url = config.base_path + route
    headers = {"Authorization": f"Bearer {config.api_key}"}
    if body is not None:
        headers["Content-Type"] = "application/json"

    _log_debug(debug, f"{method} {route}")
    if debug and body is not None:
        _log_debug(debug, f"{method} {route} body: {_redacted_body(body)}")
    try:
        response = http_client.request(method, url, content=body, headers=headers)
    except httpx.TransportError as e:
        _log_debug(debug, f"{method} {route} failed: {e}")
        raise LambdaConnectionError(f"{method} {url} failed: {e}") from e

    _log_debug(debug, f"{method} {route} -> {response.status_code}")

    if not response.is_success:
        raise LambdaAPIError(_parse_error_response(response), status_code=response.status_code)

    if method == "DELETE" or response.status_code == 204:
        return None

    try:
        decoded = response.json()
    except ValueError as e:
        raise LambdaValidationError(f"{method} {route} returned a non-JSON body") from e

    if not isinstance(decoded, dict) or ENVELOPE_KEY not in decoded:
        raise LambdaValidationError(f"{method} {route} response has no '{ENVELOPE_KEY}' member")

    payload = decoded[ENVELOPE_KEY]
    if debug:
        _log_debug(debug, f"{method} {route} payload: {json.dumps(redact_payload(payload))}")

    if response_model is None:
        return payload
    try:
        return response_model.validate_python(payload)
    except ValidationError as e:
        raise LambdaValidationError(f"{method} {route} returned an unexpected payload: {e}") from e


def _redacted_body(body: str) -> str:
    try:
        return json.dumps(redact_payload(json.loads(body)))
    except ValueError:
        return "<non-JSON body>"


def _parse_error_response(response: httpx.Response) -> ErrorResponse:
    """Read a non-2xx body as ErrorResponse.

    Bodies that are not a well-formed ErrorResponse (proxy HTML pages, empty
    bodies) become a `global/unknown` error carrying the raw text.
    """
    try:
        return ErrorResponse.model_validate_json(response.content)
    except ValidationError:
        message = response.text or response.reason_phrase or f"HTTP {response.status_code}"
        return ErrorResponse(error=Error(code=ErrorCode.UNKNOWN, message=message))
