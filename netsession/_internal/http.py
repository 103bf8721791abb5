"""Shared HTTP client configuration."""

import httpx

from netsession._version import __version__

DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_RESOURCE_TIMEOUT = 120.0


def create_http_client(
    *,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a configured, single-use async HTTP client.

    A new client per request keeps sessions isolated: no cookies or
    connections carry over from one call to the next.

    Args:
        timeout: Per-operation timeout in seconds (connect, read, write, pool).
        transport: Optional transport override, e.g. ``httpx.MockTransport``.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        transport=transport,
        follow_redirects=True,
        headers={"User-Agent": f"netsession/{__version__}"},
    )
