"""
Optional shared httpx.AsyncClient for /records requests.
When it is not initialized, RecordsClient opens a short-lived client per call.
"""
from __future__ import annotations

import httpx

_http_client: httpx.AsyncClient | None = None


def current_http_client() -> httpx.AsyncClient | None:
    """Shared client, or None before init_http_client() / after close_http_client()."""
    return _http_client


def init_http_client(timeout: float = 30.0) -> httpx.AsyncClient:
    """Create the shared client once; later calls return the existing one."""
    global _http_client
    if _http_client is None:
        _http_client = httpx.AsyncClient(timeout=timeout)
    return _http_client


async def close_http_client() -> None:
    global _http_client
    client, _http_client = _http_client, None
    if client is not None:
        await client.aclose()
