"""Lambda Cloud SDK for Python.

Typed client for the Lambda Cloud REST API: instance types, instances,
SSH keys and file systems.

Public API:
    LambdaCloudAPI - Client with one method per API operation
    Configuration, create_configuration - API key and base path
    lambda_cloud_sdk.models - Request, response and error models
    lambda_cloud_sdk.exceptions - Exception hierarchy
"""

from lambda_cloud_sdk._version import __version__
from lambda_cloud_sdk.client import LambdaCloudAPI
from lambda_cloud_sdk.configuration import (
    DEFAULT_BASE_PATH,
    Configuration,
    create_configuration,
)
from lambda_cloud_sdk.exceptions import (
    LambdaAPIError,
    LambdaCloudError,
    LambdaConfigError,
    LambdaConnectionError,
    LambdaValidationError,
)
from lambda_cloud_sdk.models import (
    AddSSHKeyConfiguration,
    Error,
    ErrorCode,
    ErrorResponse,
    FileSystem,
    Instance,
    InstanceType,
    InstanceTypeAvailability,
    InstanceTypeSpecs,
    LaunchInstance,
    LaunchInstanceConfiguration,
    ListInstanceTypes,
    Region,
    RestartedInstances,
    SSHKey,
    SSHKeyWithPrivateKey,
    TerminatedInstances,
    User,
)

__all__ = [
    "__version__",
    "LambdaCloudAPI",
    "DEFAULT_BASE_PATH",
    "Configuration",
    "create_configuration",
    "LambdaAPIError",
    "LambdaCloudError",
    "LambdaConfigError",
    "LambdaConnectionError",
    "LambdaValidationError",
    "AddSSHKeyConfiguration",
    "Error",
    "ErrorCode",
    "ErrorResponse",
    "FileSystem",
    "Instance",
    "InstanceType",
    "InstanceTypeAvailability",
    "InstanceTypeSpecs",
    "LaunchInstance",
    "LaunchInstanceConfiguration",
    "ListInstanceTypes",
    "Region",
    "RestartedInstances",
    "SSHKey",
    "SSHKeyWithPrivateKey",
    "TerminatedInstances",
    "User",
]
