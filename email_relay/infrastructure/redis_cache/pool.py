from __future__ import annotations

from typing import Optional

from redis.asyncio import Redis

from email_relay.settings import get_settings

_client: Optional[Redis] = None


def get_redis(url: Optional[str] = None, *, timeout: Optional[float] = None) -> Redis:
    """
    Lazy singleton Redis client for the email log.

    Socket timeouts bound each write, so an unreachable log store turns into
    a logged failure instead of a task that never finishes (shutdown drains
    those tasks). decode_responses=True -> we put str, not bytes.
    """
    global _client
    if _client is None:
        settings = get_settings()
        timeout = settings.redis_timeout_seconds if timeout is None else timeout
        _client = Redis.from_url(
            url or settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
        )
    return _client


async def close_redis() -> None:
    global _client
    client, _client = _client, None
    if client is not None:
        await client.aclose()
