"""
HTTP client factory for the letter numbering REST API.

Provides cached httpx.Client instances keyed by base URL and timeout,
so every service bound to the same API shares one connection pool.

Environment variables used (through surat_ui.config):
- SURAT_UI_API_URL: Base URL of the REST API
- SURAT_UI_API_TIMEOUT: Request timeout in seconds
"""

import functools

import httpx

from surat_ui import config


@functools.cache
def api_client(
    base_url: str = config.API_URL, timeout: float = config.API_TIMEOUT
) -> httpx.Client:
    """
    Return a shared httpx.Client for the REST API.

    Authentication is not baked into the client; the bearer token comes
    from the caller's Session on every request.

    Args:
        base_url: API root, e.g. "http://localhost:5000/api".
        timeout: Per-request timeout in seconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        base_url=base_url,
        timeout=timeout,
        headers={"Accept": "application/json"},
    )
