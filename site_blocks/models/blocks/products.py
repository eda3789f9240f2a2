"""Products block content."""

from __future__ import annotations

from .base import BlockType, ContentRecord, ControlKind, SectionContent, content_field


class ProductItem(ContentRecord):
    name: str = content_field("", placeholder="Product name")
    description: str = content_field("", control=ControlKind.TEXTAREA)
    price: str = content_field("", placeholder="$49")
    image: str = content_field("", control=ControlKind.IMAGE)


def _default_products() -> list[ProductItem]:
    return [
        ProductItem(
            name="Starter Kit",
            description="Everything you need to get going.",
            price="$49",
            image="https://images.pexels.com/photos/3183150/pexels-photo-3183150.jpeg",
        ),
        ProductItem(
            name="Pro Bundle",
            description="Advanced tools for growing teams.",
            price="$99",
            image="https://images.pexels.com/photos/196644/pexels-photo-196644.jpeg",
        ),
    ]


class ProductsContent(SectionContent):
    block_type = BlockType.PRODUCTS

    title: str = content_field("Our Products")
    products: list[ProductItem] = content_field(
        control=ControlKind.REPEATER,
        default_factory=_default_products,
    )


__all__ = ["ProductItem", "ProductsContent"]
