from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Callable, Iterable, Optional

from email_relay.domain.payload import serialize
from email_relay.domain.ports.log_store import LogStorePort

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return time.time_ns() // 1_000_000


class EmailLogRecorder:
    """
    Best-effort audit log of forwarded emails.

    record() returns immediately: the writes for one batch run concurrently
    in a single detached task that the request path never awaits. Failed
    writes are logged at error level and go nowhere else. Tasks in flight
    are referenced here so they are not garbage collected, and drain() lets
    shutdown wait for them.
    """

    def __init__(
        self,
        store: LogStorePort,
        *,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._store = store
        self._clock = clock
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def record(self, emails: Iterable[Any]) -> Optional[asyncio.Task[None]]:
        # keys are taken now, at call time, not when the write runs
        entries = [
            (str(self._clock()), serialize(email))
            for email in emails
        ]
        if not entries:
            return None

        task = asyncio.create_task(self._write_batch(entries))
        self._pending.add(task)
        task.add_done_callback(self._on_done)
        return task

    async def _write_batch(self, entries: list[tuple[str, str]]) -> None:
        results = await asyncio.gather(
            *(self._store.put(key, value) for key, value in entries),
            return_exceptions=True,
        )
        for (key, _), result in zip(entries, results):
            if isinstance(result, BaseException):
                logger.error(
                    "email log write failed",
                    extra={"key": key},
                    exc_info=(type(result), result, result.__traceback__),
                )

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            logger.warning("email log write cancelled before completion")
        elif task.exception() is not None:
            exc = task.exception()
            logger.error(
                "email log batch crashed",
                exc_info=(type(exc), exc, exc.__traceback__),
            )

    async def drain(self) -> None:
        """Wait for every write issued so far (used at shutdown)."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
