"""Shared fixtures: Printify credentials in env, a controllable clock, sample upstream payloads."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from printify_proxy import metrics as metrics_module

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "contracts" / "printify_products.schema.json"


class FakeClock:
    """Callable clock; advance() moves time forward in seconds."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.t = start

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


def upstream_product_payload(product_id: str = "5d39b159e7c48c000728c89f", **overrides: Any) -> dict[str, Any]:
    """Printify product JSON as returned upstream (extra fields included on purpose)."""
    payload: dict[str, Any] = {
        "id": product_id,
        "title": "Unisex Heavy Cotton Tee",
        "description": "<p>Classic fit tee.</p>",
        "tags": ["T-shirts", "Men's Clothing"],
        "options": [
            {"name": "Colors", "type": "color", "values": [{"id": 521, "title": "White"}]},
            {"name": "Sizes", "type": "size", "values": [{"id": 14, "title": "S"}]},
        ],
        "variants": [
            {
                "id": 17390,
                "sku": "UHT-WHITE-S",
                "cost": 780,
                "price": 1400,
                "title": "White / S",
                "grams": 180,
                "is_enabled": True,
                "is_default": True,
                "is_available": True,
                "options": [521, 14],
            },
            {
                "id": 17391,
                "sku": "UHT-WHITE-M",
                "cost": 780,
                "price": 1450,
                "title": "White / M",
                "grams": 190,
                "is_enabled": False,
                "is_default": False,
                "is_available": True,
            },
        ],
        "images": [
            {
                "src": "https://images.printify.com/mockup/front.jpg",
                "variant_ids": [17390, 17391],
                "position": "front",
                "is_default": True,
            },
            {
                "src": "https://images.printify.com/mockup/back.jpg",
                "variant_ids": [17390],
                "position": "back",
                "is_default": False,
            },
        ],
        "created_at": "2019-07-25 13:40:41+00:00",
        "visible": True,
        "is_locked": False,
        "blueprint_id": 6,
        "print_provider_id": 10,
    }
    payload.update(overrides)
    return payload


def upstream_list_payload(*product_ids: str) -> dict[str, Any]:
    ids = product_ids or ("5d39b159e7c48c000728c89f", "5d39b411749d0a000f30e0f4")
    return {
        "current_page": 1,
        "data": [upstream_product_payload(pid) for pid in ids],
        "last_page": 1,
        "per_page": 10,
        "total": len(ids),
    }


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def products_schema() -> dict:
    with open(SCHEMA_PATH) as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def printify_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every test starts with credentials present and metrics reset."""
    monkeypatch.setenv("PRINTIFY_API_KEY", "test-api-key")
    monkeypatch.setenv("PRINTIFY_SHOP_ID", "12345")
    monkeypatch.delenv("PRINTIFY_BASE_URL", raising=False)
    monkeypatch.delenv("PRINTIFY_TIMEOUT_S", raising=False)
    monkeypatch.delenv("PRODUCTS_CACHE_TTL_SECONDS", raising=False)
    metrics_module.reset_metrics()


@pytest.fixture
def product_payload() -> dict[str, Any]:
    return upstream_product_payload()


@pytest.fixture
def list_payload() -> dict[str, Any]:
    return upstream_list_payload()
