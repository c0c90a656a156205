from __future__ import annotations

from typing import Any, Protocol


class EmailPort(Protocol):
    async def forward(self, payload: Any) -> None:
        """Hand the payload to the upstream sender; raise UpstreamError on failure."""
