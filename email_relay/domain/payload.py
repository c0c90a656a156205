import json
from typing import Any


def serialize(payload: Any) -> str:
    """Compact JSON with non-ASCII text kept as-is, the same bytes for upstream and log."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
