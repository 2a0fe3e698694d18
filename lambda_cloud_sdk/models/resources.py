"""Pydantic models for Lambda Cloud resources.

These models match the JSON objects returned by the v1 API.
"""

from typing import Annotated, Any, ClassVar, Union

from pydantic import BaseModel, Discriminator, Tag, TypeAdapter, field_validator

# =============================================================================
# Instance Types
# =============================================================================


class InstanceTypeSpecs(BaseModel):
    vcpus: int
    memory_gib: int
    storage_gib: int


class InstanceType(BaseModel):
    """A compute tier offered by the provider.

    price_cents_per_hour is kept as the decimal string the API sends.
    """

    name: str
    description: str
    price_cents_per_hour: str
    specs: InstanceTypeSpecs

    @field_validator("price_cents_per_hour", mode="before")
    @classmethod
    def price_as_string(cls, v: Any) -> Any:
        if isinstance(v, int | float):
            return str(v)
        return v


class Region(BaseModel):
    name: str
    description: str


class InstanceTypeAvailability(BaseModel):
    """One entry of the instance-types listing."""

    instance_type: InstanceType
    regions_with_capacity_available: list[Region] = []

    @field_validator("regions_with_capacity_available", mode="before")
    @classmethod
    def null_regions(cls, v: Any) -> Any:
        return [] if v is None else v


ListInstanceTypes = dict[str, InstanceTypeAvailability]

# =============================================================================
# Instances
# =============================================================================


class Instance(BaseModel):
    """A running (or booting, or terminating) virtual machine.

    status is provider-defined ("booting", "active", "unhealthy", ...) and is
    not restricted to a fixed set.
    """

    id: str
    name: str | None = None
    ip: str | None = None
    status: str
    ssh_key_names: list[str] = []
    file_system_names: list[str] = []
    region: Region
    instance_type: InstanceType
    hostname: str | None = None
    jupyter_token: str | None = None
    jupyter_url: str | None = None

    @field_validator("ssh_key_names", "file_system_names", mode="before")
    @classmethod
    def null_names(cls, v: Any) -> Any:
        return [] if v is None else v


# =============================================================================
# SSH Keys
# =============================================================================


class SSHKey(BaseModel):
    """An SSH key registered with the account."""

    has_private_key: ClassVar[bool] = False

    id: str
    name: str
    public_key: str


class SSHKeyWithPrivateKey(SSHKey):
    """An SSH key pair generated by the provider.

    The private key is only ever returned once, in the response to the
    request that created it.
    """

    has_private_key: ClassVar[bool] = True

    private_key: str


def _ssh_key_variant(value: Any) -> str:
    if isinstance(value, dict):
        has_private_key = value.get("private_key") is not None
    else:
        has_private_key = getattr(value, "private_key", None) is not None
    return "with_private_key" if has_private_key else "public_only"


AddedSSHKey = Annotated[
    Union[Annotated[SSHKeyWithPrivateKey, Tag("with_private_key")], Annotated[SSHKey, Tag("public_only")]],
    Discriminator(_ssh_key_variant),
]

added_ssh_key_adapter: TypeAdapter[SSHKey] = TypeAdapter(AddedSSHKey)

# =============================================================================
# File Systems
# =============================================================================


class User(BaseModel):
    id: str
    email: str
    status: str


class FileSystem(BaseModel):
    """A networked storage volume that can be attached to instances."""

    id: str
    name: str
    created: str
    created_by: User
    mount_point: str
    region: Region
    is_in_use: bool
