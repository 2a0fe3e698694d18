"""Shared HTTP client configuration."""

import httpx

from lambda_cloud_sdk._version import __version__


def create_http_client(
    *,
    timeout: float | None = None,
    base_url: str | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds. None disables the timeout.
        base_url: Optional base URL for all requests.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": f"lambda-cloud-sdk/{__version__}"},
    )
