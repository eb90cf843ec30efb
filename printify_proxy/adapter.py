"""
Adapter: Printify product -> outbound projections.
Detail view keeps per-image metadata and per-variant options (empty mapping when absent);
list view collapses images to their src and drops variant options.
Field selection only; values are passed through unchanged.
"""
from __future__ import annotations

from printify_proxy.models import (
    ProductDetail,
    ProductImage,
    ProductSummary,
    ProductVariant,
    UpstreamProduct,
    UpstreamProductList,
    VariantSummary,
)


def product_to_detail(p: UpstreamProduct) -> ProductDetail:
    return ProductDetail(
        id=p.id,
        title=p.title,
        description=p.description,
        images=[
            ProductImage(src=img.src, variant_ids=img.variant_ids, is_default=img.is_default)
            for img in p.images
        ],
        variants=[
            ProductVariant(
                id=v.id,
                title=v.title,
                price=v.price,
                is_enabled=v.is_enabled,
                options=v.options if v.options is not None else {},
            )
            for v in p.variants
        ],
        options=p.options if p.options is not None else [],
        tags=p.tags,
    )


def product_to_summary(p: UpstreamProduct) -> ProductSummary:
    return ProductSummary(
        id=p.id,
        title=p.title,
        description=p.description,
        images=[img.src for img in p.images],
        variants=[
            VariantSummary(id=v.id, title=v.title, price=v.price, is_enabled=v.is_enabled)
            for v in p.variants
        ],
        tags=p.tags,
    )


def product_list_to_summaries(payload: UpstreamProductList) -> list[ProductSummary]:
    """Project every item of the list envelope, preserving upstream order."""
    return [product_to_summary(p) for p in payload.data]
