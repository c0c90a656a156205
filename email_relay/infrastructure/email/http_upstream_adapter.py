from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from email_relay.domain.errors import UpstreamError, UpstreamUnreachable
from email_relay.domain.payload import serialize
from email_relay.domain.ports.email_port import EmailPort

logger = logging.getLogger(__name__)

CONTENT_TYPE_JSON = "application/json"


class HttpUpstreamEmailAdapter(EmailPort):
    """
    Posts email payloads, untouched, to a single upstream send endpoint.

    The payload is re-serialized compactly; nothing is added or removed.
    A non-2xx answer becomes an UpstreamError carrying status, reason and
    the upstream body so the caller can log it. There is no retry.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        self._endpoint = endpoint
        self._owns_client: bool = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def forward(self, payload: Any) -> None:
        content = serialize(payload).encode("utf-8")
        try:
            resp = await self._client.post(
                self._endpoint,
                content=content,
                headers={"content-type": CONTENT_TYPE_JSON},
            )
        except httpx.HTTPError as e:
            raise UpstreamUnreachable(f"{type(e).__name__}: {e}") from e

        if not resp.is_success:
            raise UpstreamError(resp.status_code, resp.reason_phrase, resp.text)

        logger.debug(
            "upstream accepted email",
            extra={"endpoint": self._endpoint, "status": resp.status_code},
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
