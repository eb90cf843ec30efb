"""Structured request logging (one JSON line per request)."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any


SERVICE_NAME = "printify-products"


def log_request(
    route: str,
    mode: str,
    cache_hit: bool,
    latency_ms: float,
    status_code: int = 200,
    product_id: str | None = None,
    error: str | None = None,
    session_id: str | None = None,
    request_id: str | None = None,
) -> None:
    """Emit one JSON line with required fields. Credentials are never passed here."""
    payload: dict[str, Any] = {
        "ts": datetime.now(tz=timezone.utc).isoformat(),
        "service": SERVICE_NAME,
        "route": route,
        "mode": mode,
        "product_id": product_id,
        "cache_hit": cache_hit,
        "latency_ms": round(latency_ms, 2),
        "status_code": status_code,
        "error": error,
        "session_id": session_id,
        "request_id": request_id,
    }
    print(json.dumps(payload))
