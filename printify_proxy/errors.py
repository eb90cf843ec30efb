"""Error taxonomy. Every error ends the request with a 500 carrying {"error": message}."""

from __future__ import annotations


class CatalogProxyError(Exception):
    """Base class for failures surfaced to the caller."""


class ConfigurationError(CatalogProxyError):
    """Required upstream credentials are missing."""


class UpstreamError(CatalogProxyError):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Printify API error: {status_code}")


class TransportError(CatalogProxyError):
    """Upstream could not be reached, or its payload could not be decoded."""
