"""Structured JSON logging to stdout.

One JSON object per line, safe for production stdout collectors.
"""

from typing import Any, Dict
from datetime import datetime, timezone
import json

from hanztravel.obs.context import request_id_var, session_id_var


def _jsonable(value: Any) -> Any:
    if isinstance(value, float):
        # Keep logs readable; computed values stay unrounded elsewhere
        return round(value, 4)
    return value


def log_event(event: str, **fields: Any) -> None:
    now = datetime.now(timezone.utc).isoformat()
    payload: Dict[str, Any] = {
        "ts": now,
        "level": fields.pop("level", "INFO"),
        "event": event,
        "request_id": request_id_var.get(),
    }
    # Context session id unless the caller names one
    payload["session_id"] = fields.pop("session_id", None) or session_id_var.get()

    for k, v in fields.items():
        payload[k] = _jsonable(v)

    try:
        print(json.dumps(payload, separators=(",", ":"), default=str))
    except (TypeError, ValueError):
        # Never let logging break an estimate
        pass
