"""Async Printify client. One GET per call; no retries."""

from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from printify_proxy.config import PrintifyConfig
from printify_proxy.errors import TransportError, UpstreamError
from printify_proxy.models import UpstreamProduct, UpstreamProductList

M = TypeVar("M", bound=BaseModel)


def create_http_client() -> httpx.AsyncClient:
    """Shared client for all upstream calls; the app closes it on shutdown."""
    return httpx.AsyncClient()


def _headers(config: PrintifyConfig) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {config.api_key}",
        "Content-Type": "application/json",
    }


async def _get_json(client: httpx.AsyncClient, config: PrintifyConfig, path: str) -> Any:
    try:
        r = await client.get(
            f"{config.base_url}{path}",
            headers=_headers(config),
            timeout=config.timeout_s,
        )
    except httpx.HTTPError as e:
        raise TransportError(str(e) or type(e).__name__) from e
    if not r.is_success:
        raise UpstreamError(r.status_code)
    try:
        return r.json()
    except ValueError as e:
        raise TransportError(f"Invalid JSON from Printify: {e}") from e


def _validate(model: type[M], payload: Any) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise TransportError(
            f"Unexpected Printify payload: {e.error_count()} validation error(s)"
        ) from e


async def fetch_product(
    client: httpx.AsyncClient,
    config: PrintifyConfig,
    product_id: str,
) -> UpstreamProduct:
    """GET /v1/shops/{shop_id}/products/{product_id}.json"""
    path = f"/v1/shops/{quote(config.shop_id, safe='')}/products/{quote(product_id, safe='')}.json"
    return _validate(UpstreamProduct, await _get_json(client, config, path))


async def fetch_products(
    client: httpx.AsyncClient,
    config: PrintifyConfig,
) -> UpstreamProductList:
    """GET /v1/shops/{shop_id}/products.json"""
    path = f"/v1/shops/{quote(config.shop_id, safe='')}/products.json"
    return _validate(UpstreamProductList, await _get_json(client, config, path))
