"""printify-products: Printify catalog proxy with in-memory TTL cache and permissive CORS."""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import Depends, FastAPI, Query, Request, Response

from printify_proxy import adapter as adapter_module
from printify_proxy import logging_utils as logging_utils_module
from printify_proxy import metrics as metrics_module
from printify_proxy import printify_client as printify_client_module
from printify_proxy.cache import CatalogCache
from printify_proxy.config import PrintifyConfig
from printify_proxy.models import ErrorResponse, ProductDetailResponse, ProductListResponse


ROUTE = "/printify-products"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, apikey",
}


def _json_headers(cache_status: str | None = None) -> dict[str, str]:
    headers = {**CORS_HEADERS, "Content-Type": "application/json"}
    if cache_status is not None:
        headers["X-Cache"] = cache_status
    return headers


def _session_request_ids(request: Request) -> tuple[str | None, str | None]:
    """Read x-session-id and x-request-id from headers; default None."""
    session_id = request.headers.get("x-session-id") or None
    request_id = request.headers.get("x-request-id") or None
    return session_id, request_id


def get_cache(request: Request) -> CatalogCache:
    return request.app.state.cache


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


async def _fetch_detail_body(client: httpx.AsyncClient, config: PrintifyConfig, product_id: str) -> str:
    upstream = await printify_client_module.fetch_product(client, config, product_id)
    return ProductDetailResponse(product=adapter_module.product_to_detail(upstream)).model_dump_json()


async def _fetch_list_body(client: httpx.AsyncClient, config: PrintifyConfig) -> str:
    upstream = await printify_client_module.fetch_products(client, config)
    return ProductListResponse(products=adapter_module.product_list_to_summaries(upstream)).model_dump_json()


def create_app(
    cache: CatalogCache | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Build the app with the cache and upstream client it owns (fresh per process; the client is closed on shutdown)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.http_client.aclose()

    app = FastAPI(title="printify-products", version="0.1.0", lifespan=lifespan)
    app.state.cache = cache if cache is not None else CatalogCache()
    app.state.http_client = (
        http_client if http_client is not None else printify_client_module.create_http_client()
    )

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/metrics")
    def metrics() -> dict:
        """Lightweight JSON metrics (in-memory since process start)."""
        return metrics_module.get_metrics()

    @app.options(ROUTE)
    def preflight() -> Response:
        """CORS pre-flight: empty body, no cache, no upstream call."""
        return Response(headers=CORS_HEADERS)

    @app.get(ROUTE)
    async def printify_products(
        request: Request,
        product_id: str | None = Query(default=None, alias="id"),
        cache: CatalogCache = Depends(get_cache),
        client: httpx.AsyncClient = Depends(get_http_client),
    ) -> Response:
        """Single product when ?id= is given, else the full product list. Cached bodies are returned verbatim."""
        session_id, request_id = _session_request_ids(request)
        t0 = time.perf_counter()
        mode = "detail" if product_id else "list"
        upstream_called = False

        try:
            config = PrintifyConfig.from_env()
            now = cache.now()
            if product_id:
                body = cache.get_product(product_id, now)
                cache_hit = body is not None
                if body is None:
                    upstream_called = True
                    body = await _fetch_detail_body(client, config, product_id)
                    cache.set_product(product_id, body, now)
            else:
                body = cache.get_list(now)
                cache_hit = body is not None
                if body is None:
                    upstream_called = True
                    body = await _fetch_list_body(client, config)
                    cache.set_list(body, now)
        except Exception as e:
            latency_ms = (time.perf_counter() - t0) * 1000
            metrics_module.record_request(
                cache_hit=False, latency_ms=latency_ms, upstream_called=upstream_called, error=True
            )
            logging_utils_module.log_request(
                route=ROUTE,
                mode=mode,
                cache_hit=False,
                latency_ms=latency_ms,
                status_code=500,
                product_id=product_id or None,
                error=str(e),
                session_id=session_id,
                request_id=request_id,
            )
            return Response(
                content=ErrorResponse(error=str(e)).model_dump_json(),
                status_code=500,
                headers=_json_headers(),
            )

        latency_ms = (time.perf_counter() - t0) * 1000
        metrics_module.record_request(
            cache_hit=cache_hit, latency_ms=latency_ms, upstream_called=upstream_called
        )
        logging_utils_module.log_request(
            route=ROUTE,
            mode=mode,
            cache_hit=cache_hit,
            latency_ms=latency_ms,
            product_id=product_id or None,
            session_id=session_id,
            request_id=request_id,
        )
        return Response(content=body, headers=_json_headers("HIT" if cache_hit else "MISS"))

    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("printify_proxy.main:app", host="0.0.0.0", port=8040, reload=True)


if __name__ == "__main__":
    main()
