"""Public models for the Lambda Cloud API.

Example:
    from lambda_cloud_sdk.models import LaunchInstanceConfiguration

    config = LaunchInstanceConfiguration(
        region_name="us-east-1",
        instance_type_name="gpu_1x_a100",
        ssh_key_names=["mykey"],
    )
"""

from lambda_cloud_sdk.models.errors import Error, ErrorCode, ErrorResponse
from lambda_cloud_sdk.models.operations import (
    AddSSHKeyConfiguration,
    InstanceIdsRequest,
    LaunchInstance,
    LaunchInstanceConfiguration,
    RestartedInstances,
    TerminatedInstances,
)
from lambda_cloud_sdk.models.resources import (
    AddedSSHKey,
    FileSystem,
    Instance,
    InstanceType,
    InstanceTypeAvailability,
    InstanceTypeSpecs,
    ListInstanceTypes,
    Region,
    SSHKey,
    SSHKeyWithPrivateKey,
    User,
)

__all__ = [
    "Error",
    "ErrorCode",
    "ErrorResponse",
    "AddSSHKeyConfiguration",
    "InstanceIdsRequest",
    "LaunchInstance",
    "LaunchInstanceConfiguration",
    "RestartedInstances",
    "TerminatedInstances",
    "AddedSSHKey",
    "FileSystem",
    "Instance",
    "InstanceType",
    "InstanceTypeAvailability",
    "InstanceTypeSpecs",
    "ListInstanceTypes",
    "Region",
    "SSHKey",
    "SSHKeyWithPrivateKey",
    "User",
]
