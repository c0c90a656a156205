from __future__ import annotations

from typing import Optional


class RelayError(Exception):
    """Base class for all relay-level errors."""

    pass


class UpstreamError(RelayError):
    """The upstream email API did not accept the email."""

    def __init__(
        self,
        status_code: Optional[int],
        status_text: str,
        body: str = "",
        *,
        message: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        if message is None:
            message = f"Error sending email: {status_code} {status_text}\n{body}"
        super().__init__(message.rstrip())


class UpstreamUnreachable(UpstreamError):
    """No response was received from the upstream email API."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            None,
            "",
            reason,
            message=f"Error sending email: upstream unreachable\n{reason}",
        )
