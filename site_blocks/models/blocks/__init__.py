"""Typed block exports and helpers."""

from __future__ import annotations

from .about import AboutContent
from .base import (
    Block,
    BlockType,
    ContentRecord,
    ControlKind,
    SectionContent,
    field_control,
    field_label,
    field_placeholder,
    list_item_model,
)
from .contact import ContactContent
from .footer import FooterContent
from .gallery import GalleryContent, GalleryImage
from .generic import GenericContent
from .hero import HeroContent
from .palette import PALETTE_CATEGORIES, PaletteEntry, palette, search_palette
from .products import ProductItem, ProductsContent
from .registry import (
    BLOCK_LABELS,
    CONTENT_CLASS_MAP,
    content_model_for,
    create_block,
    get_default_content,
    label_for,
    new_block_id,
)
from .services import ServiceItem, ServicesContent
from .testimonials import Testimonial, TestimonialsContent

__all__ = [
    "AboutContent",
    "BLOCK_LABELS",
    "Block",
    "BlockType",
    "CONTENT_CLASS_MAP",
    "ContactContent",
    "ContentRecord",
    "ControlKind",
    "FooterContent",
    "GalleryContent",
    "GalleryImage",
    "GenericContent",
    "HeroContent",
    "PALETTE_CATEGORIES",
    "PaletteEntry",
    "ProductItem",
    "ProductsContent",
    "SectionContent",
    "ServiceItem",
    "ServicesContent",
    "Testimonial",
    "TestimonialsContent",
    "content_model_for",
    "create_block",
    "field_control",
    "field_label",
    "field_placeholder",
    "get_default_content",
    "label_for",
    "list_item_model",
    "new_block_id",
    "palette",
    "search_palette",
]
