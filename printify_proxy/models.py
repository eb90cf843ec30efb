"""Upstream Printify payloads and the two outbound projections (printify_products.schema.json)."""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

Price = Union[int, float]
# Upstream values are validated without coercion: "1400" is not a price.
StrictPrice = Union[StrictInt, StrictFloat]


class UpstreamImage(BaseModel):
    """Image as returned by Printify."""
    src: StrictStr
    variant_ids: list[StrictInt]
    is_default: StrictBool


class UpstreamVariant(BaseModel):
    """Variant as returned by Printify. options is passed through untouched."""
    id: StrictInt
    title: StrictStr
    price: StrictPrice
    is_enabled: StrictBool
    options: Any = None


class UpstreamProduct(BaseModel):
    """Product as returned by Printify; unknown fields are ignored."""
    id: StrictStr
    title: StrictStr
    description: StrictStr
    images: list[UpstreamImage]
    variants: list[UpstreamVariant]
    options: Optional[list[dict[str, Any]]] = None
    tags: list[StrictStr]


class UpstreamProductList(BaseModel):
    """Envelope of GET /v1/shops/{shop_id}/products.json."""
    data: list[UpstreamProduct]


class ProductImage(BaseModel):
    src: str
    variant_ids: list[int]
    is_default: bool


class ProductVariant(BaseModel):
    id: int
    title: str
    price: Price
    is_enabled: bool
    options: Any = Field(default_factory=dict)


class ProductDetail(BaseModel):
    """Product (detail view)."""
    id: str
    title: str
    description: str
    images: list[ProductImage]
    variants: list[ProductVariant]
    options: list[dict[str, Any]] = Field(default_factory=list)
    tags: list[str]


class ProductDetailResponse(BaseModel):
    product: ProductDetail


class VariantSummary(BaseModel):
    id: int
    title: str
    price: Price
    is_enabled: bool


class ProductSummary(BaseModel):
    """Product (list view): images are bare URLs, variants carry no options."""
    id: str
    title: str
    description: str
    images: list[str]
    variants: list[VariantSummary]
    tags: list[str]


class ProductListResponse(BaseModel):
    products: list[ProductSummary] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
