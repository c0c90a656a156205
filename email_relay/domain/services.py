# email_relay/domain/services.py
from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import Literal, Optional

MISSING_TOKEN_MESSAGE = "You must set the TOKEN environment variable."
UNAUTHORIZED_MESSAGE = "Unauthorized"


@dataclass(frozen=True)
class AuthRejection:
    status_code: int
    message: str
    reason: Literal["missing_token", "bad_token"]


def secure_compare(a: str, b: str) -> bool:
    """
    Constant-time comparison for secrets.
    Accepts strings; falls back to bytes if needed.
    """
    try:
        # hmac.compare_digest only takes ASCII str
        return hmac.compare_digest(a, b)
    except TypeError:
        return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def authenticate(
    configured_token: Optional[str], incoming: Optional[str]
) -> Optional[AuthRejection]:
    """
    Gate a request on the shared secret.

    Returns None when the request may proceed, otherwise the rejection to
    send back. A deployment without a token rejects every request with 401
    as well, only the message differs.
    """
    if not configured_token:
        return AuthRejection(
            status_code=401, message=MISSING_TOKEN_MESSAGE, reason="missing_token"
        )
    if incoming is None or not secure_compare(incoming, configured_token):
        return AuthRejection(
            status_code=401, message=UNAUTHORIZED_MESSAGE, reason="bad_token"
        )
    return None
