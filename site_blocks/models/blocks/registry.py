"""Type registry: content models, defaults and block construction."""

from __future__ import annotations

import itertools
import time
from typing import Any

from .about import AboutContent
from .base import Block, BlockType, SectionContent
from .contact import ContactContent
from .footer import FooterContent
from .gallery import GalleryContent
from .generic import GenericContent
from .hero import HeroContent
from .products import ProductsContent
from .services import ServicesContent
from .testimonials import TestimonialsContent

CONTENT_CLASS_MAP: dict[BlockType, type[SectionContent]] = {
    BlockType.HERO: HeroContent,
    BlockType.ABOUT: AboutContent,
    BlockType.SERVICES: ServicesContent,
    BlockType.CONTACT: ContactContent,
    BlockType.GALLERY: GalleryContent,
    BlockType.TESTIMONIALS: TestimonialsContent,
    BlockType.PRODUCTS: ProductsContent,
    BlockType.FOOTER: FooterContent,
}

BLOCK_LABELS: dict[BlockType, str] = {
    BlockType.HERO: "Hero Section",
    BlockType.ABOUT: "About",
    BlockType.SERVICES: "Services",
    BlockType.CONTACT: "Contact",
    BlockType.GALLERY: "Gallery",
    BlockType.TESTIMONIALS: "Testimonials",
    BlockType.PRODUCTS: "Products",
    BlockType.FOOTER: "Footer",
}

_SEQUENCE = itertools.count(1)


def _known(block_type: BlockType | str) -> BlockType | None:
    if isinstance(block_type, BlockType):
        return block_type
    try:
        return BlockType(block_type)
    except ValueError:
        return None


def content_model_for(block_type: BlockType | str) -> type[SectionContent]:
    normalized = _known(block_type)
    if normalized is None:
        return GenericContent
    return CONTENT_CLASS_MAP.get(normalized, GenericContent)


def label_for(block_type: BlockType | str) -> str:
    normalized = _known(block_type)
    if normalized is None:
        return str(block_type)
    return BLOCK_LABELS.get(normalized, normalized.value)


def get_default_content(block_type: BlockType | str) -> dict[str, Any]:
    """Return a fresh default content mapping; ``{}`` for unrecognised types."""
    if _known(block_type) is None:
        return {}
    return content_model_for(block_type).defaults()


def new_block_id(block_type: BlockType | str) -> str:
    tag = block_type.value if isinstance(block_type, BlockType) else str(block_type)
    return f"{tag}_{time.time_ns() // 1_000_000}_{next(_SEQUENCE)}"


def create_block(block_type: BlockType | str, *, name: str | None = None) -> Block:
    """Build a visible block seeded with the type's default content."""
    return Block(
        id=new_block_id(block_type),
        type=block_type,
        name=name or label_for(block_type),
        visible=True,
        content=get_default_content(block_type),
    )


__all__ = [
    "BLOCK_LABELS",
    "CONTENT_CLASS_MAP",
    "content_model_for",
    "create_block",
    "get_default_content",
    "label_for",
    "new_block_id",
]
