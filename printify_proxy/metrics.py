"""In-memory metrics since process start (requests, cache hits, upstream calls, errors, latency)."""

from __future__ import annotations

_metrics: dict[str, int | float] = {
    "requests_total": 0,
    "cache_hits_total": 0,
    "upstream_calls_total": 0,
    "errors_total": 0,
    "sum_latency_ms": 0.0,
}


def record_request(
    cache_hit: bool,
    latency_ms: float,
    upstream_called: bool = False,
    error: bool = False,
) -> None:
    """Record one catalog request for metrics."""
    _metrics["requests_total"] = _metrics.get("requests_total", 0) + 1
    _metrics["sum_latency_ms"] = _metrics.get("sum_latency_ms", 0.0) + latency_ms
    if cache_hit:
        _metrics["cache_hits_total"] = _metrics.get("cache_hits_total", 0) + 1
    if upstream_called:
        _metrics["upstream_calls_total"] = _metrics.get("upstream_calls_total", 0) + 1
    if error:
        _metrics["errors_total"] = _metrics.get("errors_total", 0) + 1


def get_metrics() -> dict[str, int | float]:
    """Return current metrics as dict (for /metrics endpoint). Includes cache_hit_rate."""
    total = _metrics.get("requests_total", 0)
    sum_ms = _metrics.get("sum_latency_ms", 0.0)
    avg = sum_ms / total if total else 0.0
    hits = _metrics.get("cache_hits_total", 0)
    rate = (hits / total) if total else 0.0
    return {
        "requests_total": total,
        "cache_hits_total": hits,
        "upstream_calls_total": _metrics.get("upstream_calls_total", 0),
        "errors_total": _metrics.get("errors_total", 0),
        "avg_latency_ms": round(avg, 2),
        "cache_hit_rate": round(rate, 4),
    }


def reset_metrics() -> None:
    """Reset in-memory counters (for tests only)."""
    _metrics["requests_total"] = 0
    _metrics["cache_hits_total"] = 0
    _metrics["upstream_calls_total"] = 0
    _metrics["errors_total"] = 0
    _metrics["sum_latency_ms"] = 0.0
