"""Request and response bodies for Lambda Cloud API operations."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from lambda_cloud_sdk.models.resources import Instance

# =============================================================================
# Request Models
# =============================================================================


class LaunchInstanceConfiguration(BaseModel):
    """Payload for launching instances.

    Required fields:
        region_name: Region to launch in (e.g. "us-east-1")
        instance_type_name: Instance type to launch (e.g. "gpu_1x_a100")
        ssh_key_names: Exactly one SSH key name to install on the instances

    Optional fields:
        file_system_names: File systems to attach (must be in the same region)
        quantity: Number of instances to launch (default: 1 on the server)
        name: Display name for the instances
    """

    region_name: str
    instance_type_name: str
    ssh_key_names: list[str] = Field(min_length=1, max_length=1)
    file_system_names: list[str] | None = None
    quantity: int | None = Field(default=None, ge=1)
    name: str | None = None


class AddSSHKeyConfiguration(BaseModel):
    """Payload for adding an SSH key.

    Omitting public_key asks the provider to generate a key pair; the
    response then includes the private key.
    """

    name: str
    public_key: str | None = None


class InstanceIdsRequest(BaseModel):
    """Payload for terminate and restart operations."""

    instance_ids: list[str]


# =============================================================================
# Response Models
# =============================================================================


class LaunchInstance(BaseModel):
    instance_ids: list[str] = []

    @field_validator("instance_ids", mode="before")
    @classmethod
    def null_ids(cls, v: Any) -> Any:
        return [] if v is None else v


class TerminatedInstances(BaseModel):
    terminated_instances: list[Instance] = []

    @field_validator("terminated_instances", mode="before")
    @classmethod
    def null_instances(cls, v: Any) -> Any:
        return [] if v is None else v


class RestartedInstances(BaseModel):
    restarted_instances: list[Instance] = []

    @field_validator("restarted_instances", mode="before")
    @classmethod
    def null_instances(cls, v: Any) -> Any:
        return [] if v is None else v
