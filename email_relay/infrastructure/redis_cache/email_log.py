from __future__ import annotations

from redis.asyncio import Redis

from email_relay.domain.ports.log_store import LogStorePort


class RedisEmailLog(LogStorePort):
    def __init__(self, redis: Redis, *, key_prefix: str = "") -> None:
        self._redis = redis
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def put(self, key: str, value: str) -> None:
        # plain SET: a second write within the same millisecond replaces the first
        await self._redis.set(self._key(key), value)
