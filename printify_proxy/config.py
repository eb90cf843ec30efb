"""Upstream configuration read from the environment at request time."""

from __future__ import annotations

import os
from dataclasses import dataclass

from printify_proxy.errors import ConfigurationError


@dataclass(frozen=True)
class PrintifyConfig:
    api_key: str
    shop_id: str
    base_url: str = "https://api.printify.com"
    timeout_s: float = 10.0

    @classmethod
    def from_env(cls) -> "PrintifyConfig":
        """Build config from env; missing or empty credentials raise ConfigurationError."""
        api_key = os.environ.get("PRINTIFY_API_KEY") or ""
        shop_id = os.environ.get("PRINTIFY_SHOP_ID") or ""
        if not api_key or not shop_id:
            raise ConfigurationError("Missing Printify credentials in environment")
        return cls(
            api_key=api_key,
            shop_id=shop_id,
            base_url=os.environ.get("PRINTIFY_BASE_URL", cls.base_url).rstrip("/"),
            timeout_s=_env_number("PRINTIFY_TIMEOUT_S", cls.timeout_s, float),
        )


def _env_number(name: str, default: float, cast: type) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return cast(default)
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def get_ttl_seconds() -> int:
    """TTL in seconds from env PRODUCTS_CACHE_TTL_SECONDS (default 300). Bad values raise ConfigurationError."""
    return _env_number("PRODUCTS_CACHE_TTL_SECONDS", 300, int)
