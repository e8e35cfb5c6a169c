from __future__ import annotations

from typing import Optional
import httpx

_client: Optional[httpx.AsyncClient] = None


async def open_http_client(timeout: float = 10.0) -> httpx.AsyncClient:
    """Create the shared AsyncClient used by outbound gateways (idempotent)."""
    global _client
    if _client is None:
        _client = httpx.AsyncClient(timeout=timeout)
    return _client


def get_http_client() -> httpx.AsyncClient:
    if _client is None:
        raise RuntimeError("HTTP client not opened; call open_http_client() first.")
    return _client


async def close_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
