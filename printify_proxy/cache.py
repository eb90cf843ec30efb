"""
In-memory TTL cache for serialized catalog responses.
Detail bodies are keyed by product id; the list body lives in a single slot.
Owned by the app (built once in create_app) and gone on restart. Staleness is
judged lazily on read: an entry is fresh while now - ts < ttl.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from printify_proxy.config import get_ttl_seconds


@dataclass(frozen=True)
class CacheEntry:
    body: str
    ts: float


class CatalogCache:
    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = float(get_ttl_seconds() if ttl_seconds is None else ttl_seconds)
        self._clock = clock
        self._products: dict[str, CacheEntry] = {}
        self._list: CacheEntry | None = None

    def now(self) -> float:
        return self._clock()

    def _fresh(self, entry: CacheEntry | None, now: float) -> str | None:
        if entry is None or now - entry.ts >= self.ttl_seconds:
            return None
        return entry.body

    def get_product(self, product_id: str, now: float | None = None) -> str | None:
        """Return cached detail body if present and not expired, else None."""
        return self._fresh(self._products.get(product_id), self.now() if now is None else now)

    def set_product(self, product_id: str, body: str, now: float | None = None) -> None:
        self._products[product_id] = CacheEntry(body, self.now() if now is None else now)

    def get_list(self, now: float | None = None) -> str | None:
        """Return cached list body if present and not expired, else None."""
        return self._fresh(self._list, self.now() if now is None else now)

    def set_list(self, body: str, now: float | None = None) -> None:
        self._list = CacheEntry(body, self.now() if now is None else now)

    def clear(self) -> None:
        """Drop every entry (for tests only)."""
        self._products.clear()
        self._list = None
