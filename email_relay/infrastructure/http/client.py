from __future__ import annotations

from typing import Optional

import httpx

USER_AGENT = "email-relay/0.1.0"

_client: Optional[httpx.AsyncClient] = None


def build_http_client(timeout: float) -> httpx.AsyncClient:
    """Client used for every upstream call; no redirects, no retries."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers={"user-agent": USER_AGENT},
        follow_redirects=False,
    )


async def open_http_client(timeout: float = 10.0) -> httpx.AsyncClient:
    global _client
    if _client is None:
        _client = build_http_client(timeout)
    return _client


def get_http_client() -> httpx.AsyncClient:
    if _client is None:
        raise RuntimeError(
            "HTTP client not opened yet. Call open_http_client() at startup."
        )
    return _client


async def close_http_client() -> None:
    global _client
    client, _client = _client, None
    if client is not None:
        await client.aclose()
