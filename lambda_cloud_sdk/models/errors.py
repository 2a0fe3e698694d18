"""Pydantic models for Lambda Cloud API error responses."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, field_validator, model_validator


class ErrorCode(StrEnum):
    """Closed set of error codes returned by the API."""

    # Global
    UNKNOWN = "global/unknown"
    INVALID_API_KEY = "global/invalid-api-key"
    ACCOUNT_INACTIVE = "global/account-inactive"
    INVALID_PARAMETERS = "global/invalid-parameters"
    OBJECT_DOES_NOT_EXIST = "global/object-does-not-exist"

    # Instance launch
    INSUFFICIENT_CAPACITY = "instance-operations/launch/insufficient-capacity"
    FILE_SYSTEM_IN_WRONG_REGION = "instance-operations/launch/file-system-in-wrong-region"
    FILE_SYSTEMS_NOT_SUPPORTED = "instance-operations/launch/file-systems-not-supported"

    # SSH keys
    SSH_KEY_IN_USE = "ssh-keys/key-in-use"


class Error(BaseModel):
    """A single error as reported by the API.

    code is always a member of ErrorCode; codes outside the known set become
    global/unknown. raw_code keeps the string the API actually sent.
    """

    code: ErrorCode
    message: str
    suggestion: str | None = None
    raw_code: str | None = None

    @model_validator(mode="before")
    @classmethod
    def keep_raw_code(cls, data: Any) -> Any:
        if isinstance(data, dict) and "raw_code" not in data:
            code = data.get("code")
            if isinstance(code, str):
                return {**data, "raw_code": str(code)}
        return data

    @field_validator("code", mode="before")
    @classmethod
    def unknown_code_fallback(cls, v: Any) -> Any:
        if not isinstance(v, str) or v not in ErrorCode._value2member_map_:
            return ErrorCode.UNKNOWN
        return v


class ErrorResponse(BaseModel):
    """Body of every non-2xx response.

    field_errors maps a request field name to the validation error for it,
    in addition to the top-level error.
    """

    error: Error
    field_errors: dict[str, Error] = {}

    @field_validator("field_errors", mode="before")
    @classmethod
    def null_field_errors(cls, v: Any) -> Any:
        return {} if v is None else v
