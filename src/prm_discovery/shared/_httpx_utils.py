"""Utilities for creating standardized httpx AsyncClient instances."""

from typing import Any

import httpx

from prm_discovery.settings import get_settings

__all__ = ["create_prm_http_client"]


def create_prm_http_client(**kwargs: Any) -> httpx.AsyncClient:
    """Create an httpx AsyncClient with discovery defaults.

    Defaults come from ``DiscoverySettings``:
    - follow_redirects (True unless PRM_FOLLOW_REDIRECTS says otherwise)
    - a timeout of PRM_HTTP_TIMEOUT seconds (30 by default)

    Any keyword argument accepted by httpx.AsyncClient overrides the defaults.

    Note:
        The returned AsyncClient must be used as a context manager to ensure
        proper cleanup of connections.

    Examples:
        async with create_prm_http_client() as client:
            prm = await fetch_protected_resource_metadata(url, client, resource)

        # With a custom SSL context
        import ssl
        ssl_ctx = ssl.create_default_context(cafile="internal-ca.pem")
        async with create_prm_http_client(verify=ssl_ctx) as client:
            ...
    """
    settings = get_settings()
    default_kwargs: dict[str, Any] = {
        "follow_redirects": settings.follow_redirects,
        "timeout": httpx.Timeout(settings.http_timeout),
    }
    default_kwargs.update(kwargs)
    return httpx.AsyncClient(**default_kwargs)
