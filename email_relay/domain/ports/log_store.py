from typing import Protocol


class LogStorePort(Protocol):
    async def put(self, key: str, value: str) -> None:
        """Store value under key, replacing whatever was there."""
