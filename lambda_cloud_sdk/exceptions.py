"""Public exceptions for the Lambda Cloud SDK."""

from lambda_cloud_sdk.models.errors import Error, ErrorCode, ErrorResponse


class LambdaCloudError(Exception):
    """Base exception for all Lambda Cloud SDK errors."""


class LambdaAPIError(LambdaCloudError):
    """Request rejected by the Lambda Cloud API.

    Carries the parsed ErrorResponse exactly as the provider returned it.
    """

    def __init__(self, error_response: ErrorResponse, status_code: int | None = None) -> None:
        super().__init__(f"{error_response.error.code}: {error_response.error.message}")
        self.error_response = error_response
        self.status_code = status_code

    @property
    def error(self) -> Error:
        return self.error_response.error

    @property
    def code(self) -> ErrorCode:
        return self.error_response.error.code

    @property
    def suggestion(self) -> str | None:
        return self.error_response.error.suggestion

    @property
    def field_errors(self) -> dict[str, Error]:
        return self.error_response.field_errors


class LambdaConnectionError(LambdaCloudError):
    """Transport failure (DNS, connection refused, timeout) before any API response."""


class LambdaConfigError(LambdaCloudError):
    """Configuration error (missing env vars, invalid config)."""


class LambdaValidationError(LambdaCloudError):
    """Validation error for response data."""
