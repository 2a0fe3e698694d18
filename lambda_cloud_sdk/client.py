"""User-facing client for the Lambda Cloud API.

Example usage:
    from lambda_cloud_sdk import LambdaCloudAPI, LaunchInstanceConfiguration, create_configuration

    with LambdaCloudAPI(create_configuration(api_key="your-api-key")) as api:
        launched = api.launch_instance(
            LaunchInstanceConfiguration(
                region_name="us-east-1",
                instance_type_name="gpu_1x_a100",
                ssh_key_names=["mykey"],
            )
        )
        api.terminate_instances(launched.instance_ids)
"""

import os
from collections.abc import Sequence
from typing import Annotated, Any
from urllib.parse import quote

import httpx
from pydantic import BeforeValidator, TypeAdapter

from lambda_cloud_sdk._internal.fetcher import HttpMethod, fetch
from lambda_cloud_sdk._internal.http import create_http_client
from lambda_cloud_sdk.configuration import Configuration
from lambda_cloud_sdk.models.operations import (
    AddSSHKeyConfiguration,
    InstanceIdsRequest,
    LaunchInstance,
    LaunchInstanceConfiguration,
    RestartedInstances,
    TerminatedInstances,
)
from lambda_cloud_sdk.models.resources import (
    FileSystem,
    Instance,
    InstanceTypeAvailability,
    SSHKey,
    SSHKeyWithPrivateKey,
    added_ssh_key_adapter,
)


def _list_or_empty(v: Any) -> Any:
    return [] if v is None else v


def _dict_or_empty(v: Any) -> Any:
    return {} if v is None else v


_instance_types_adapter = TypeAdapter(
    Annotated[dict[str, InstanceTypeAvailability], BeforeValidator(_dict_or_empty)]
)
_instances_adapter = TypeAdapter(Annotated[list[Instance], BeforeValidator(_list_or_empty)])
_instance_adapter = TypeAdapter(Instance)
_ssh_keys_adapter = TypeAdapter(Annotated[list[SSHKey], BeforeValidator(_list_or_empty)])
_file_systems_adapter = TypeAdapter(Annotated[list[FileSystem], BeforeValidator(_list_or_empty)])
_launch_adapter = TypeAdapter(LaunchInstance)
_terminated_adapter = TypeAdapter(TerminatedInstances)
_restarted_adapter = TypeAdapter(RestartedInstances)


class LambdaCloudAPI:
    """Client for the Lambda Cloud v1 REST API.

    Each method sends exactly one request. Domain failures raise LambdaAPIError
    with the provider's ErrorResponse; transport failures raise
    LambdaConnectionError. The client keeps no state beyond its configuration
    and HTTP transport, so calls may be issued concurrently.
    """

    def __init__(
        self,
        configuration: Configuration,
        *,
        http_client: httpx.Client | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            configuration: API key and base path. A missing base path is
                replaced by the default in the client's own copy.
            http_client: Optional transport. Timeouts and proxies are set
                here by the caller; a client passed in is not closed by close().
            debug: Enable debug logging to stderr.
        """
        self._configuration = configuration.with_defaults()
        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else create_http_client()
        self._debug = debug

    @classmethod
    def from_env(cls) -> "LambdaCloudAPI":
        """Create a client from environment variables.

        Required environment variables:
            LAMBDA_API_KEY: The API key sent as a bearer token.

        Optional environment variables:
            LAMBDA_BASE_PATH: Override for the API root URL.
            LAMBDA_DEBUG: Set to "1" to enable debug logging.

        Raises:
            LambdaConfigError: If LAMBDA_API_KEY is not set.
        """
        debug = os.environ.get("LAMBDA_DEBUG", "") == "1"
        return cls(Configuration.from_env(), debug=debug)

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "LambdaCloudAPI":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch(
        self,
        route: str,
        method: HttpMethod,
        body: str | None = None,
        response_model: TypeAdapter[Any] | None = None,
    ) -> Any:
        return fetch(
            self._http_client,
            self._configuration,
            route,
            method,
            body,
            response_model=response_model,
            debug=self._debug,
        )

    # =========================================================================
    # Instance Types
    # =========================================================================

    def list_instance_types(self) -> dict[str, InstanceTypeAvailability]:
        """List instance types.

        Returns:
            Mapping of instance type name to the type and the regions that
            currently have capacity. Empty when there are none.
        """
        return self._fetch("/instance-types", "GET", response_model=_instance_types_adapter)

    # =========================================================================
    # Instances
    # =========================================================================

    def list_running_instances(self) -> list[Instance]:
        """List running instances, or an empty list if there are none."""
        return self._fetch("/instances", "GET", response_model=_instances_adapter)

    def get_running_instance(self, instance_id: str) -> Instance:
        """Get a running instance by ID.

        Raises:
            LambdaAPIError: With code global/object-does-not-exist if there is
                no such instance.
        """
        return self._fetch(
            f"/instances/{quote(instance_id, safe='')}", "GET", response_model=_instance_adapter
        )

    def launch_instance(self, config: LaunchInstanceConfiguration) -> LaunchInstance:
        """Launch instances.

        Args:
            config: Launch configuration.

        Returns:
            The IDs of the launched instances.

        Raises:
            LambdaAPIError: On invalid parameters or missing permissions, or
                with a launch-specific code (insufficient capacity, file system
                in the wrong region, file systems not supported).
        """
        return self._fetch(
            "/instance-operations/launch",
            "POST",
            config.model_dump_json(exclude_none=True),
            response_model=_launch_adapter,
        )

    def terminate_instances(self, instance_ids: Sequence[str] | str) -> TerminatedInstances:
        """Terminate instances.

        Args:
            instance_ids: One instance ID or a sequence of them.

        Returns:
            The terminated instances.
        """
        if isinstance(instance_ids, str):
            instance_ids = [instance_ids]
        return self._fetch(
            "/instance-operations/terminate",
            "POST",
            InstanceIdsRequest(instance_ids=list(instance_ids)).model_dump_json(),
            response_model=_terminated_adapter,
        )

    def restart_instances(self, instance_ids: Sequence[str]) -> RestartedInstances:
        """Restart instances.

        Args:
            instance_ids: IDs of the instances to restart.

        Returns:
            The restarted instances.
        """
        return self._fetch(
            "/instance-operations/restart",
            "POST",
            InstanceIdsRequest(instance_ids=list(instance_ids)).model_dump_json(),
            response_model=_restarted_adapter,
        )

    # =========================================================================
    # SSH Keys
    # =========================================================================

    def list_ssh_keys(self) -> list[SSHKey]:
        """List SSH keys, or an empty list if there are none."""
        return self._fetch("/ssh-keys", "GET", response_model=_ssh_keys_adapter)

    def add_ssh_key(self, config: AddSSHKeyConfiguration) -> SSHKey | SSHKeyWithPrivateKey:
        """Add a new SSH key.

        Args:
            config: Key name and optional public key. Without a public key the
                provider generates a key pair.

        Returns:
            SSHKeyWithPrivateKey when the pair was generated server-side (the
            private key is not retrievable later), otherwise SSHKey. Branch on
            `has_private_key`.

        Raises:
            LambdaAPIError: With code ssh-keys/key-in-use if the name is taken.
        """
        return self._fetch(
            "/ssh-keys",
            "POST",
            config.model_dump_json(exclude_none=True),
            response_model=added_ssh_key_adapter,
        )

    def delete_ssh_key(self, key_id: str) -> None:
        """Delete an SSH key.

        Raises:
            LambdaAPIError: If the key does not exist or on missing permissions.
        """
        self._fetch(f"/ssh-keys/{quote(key_id, safe='')}", "DELETE")

    # =========================================================================
    # File Systems
    # =========================================================================

    def list_file_systems(self) -> list[FileSystem]:
        """List file systems, or an empty list if there are none."""
        return self._fetch("/file-systems", "GET", response_model=_file_systems_adapter)
