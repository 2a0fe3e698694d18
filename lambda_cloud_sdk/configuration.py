"""Connection settings for the Lambda Cloud API."""

import os

from pydantic import BaseModel, ConfigDict

from lambda_cloud_sdk.exceptions import LambdaConfigError

DEFAULT_BASE_PATH = "https://cloud.lambdalabs.com/api/v1"


class Configuration(BaseModel):
    """Base URL and API key used for every request.

    Instances are immutable; use `create_configuration()` or `with_defaults()`
    to obtain a fully populated value.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_path: str = ""

    def with_defaults(self) -> "Configuration":
        """Return this configuration, or a copy with the default base path filled in."""
        if self.base_path:
            return self
        return self.model_copy(update={"base_path": DEFAULT_BASE_PATH})

    @classmethod
    def from_env(cls) -> "Configuration":
        """Create a configuration from environment variables.

        Required environment variables:
            LAMBDA_API_KEY: The API key sent as a bearer token.

        Optional environment variables:
            LAMBDA_BASE_PATH: Override for the API root URL.

        Raises:
            LambdaConfigError: If LAMBDA_API_KEY is not set.
        """
        api_key = os.environ.get("LAMBDA_API_KEY")
        if not api_key:
            raise LambdaConfigError("LAMBDA_API_KEY is not set")
        return create_configuration(api_key, os.environ.get("LAMBDA_BASE_PATH"))


def create_configuration(api_key: str, base_path: str | None = None) -> Configuration:
    """Create a configuration, applying the default base path when none is given."""
    return Configuration(api_key=api_key, base_path=base_path or "").with_defaults()
