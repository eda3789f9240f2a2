"""Block palette shown in the editor sidebar."""

from __future__ import annotations

from dataclasses import dataclass

from .base import BlockType
from .registry import label_for


@dataclass(frozen=True, slots=True)
class PaletteEntry:
    type: BlockType
    label: str
    description: str
    category: str


PALETTE_CATEGORIES = {
    "basic": "Basic Sections",
    "content": "Content Sections",
}

_PALETTE: tuple[PaletteEntry, ...] = (
    PaletteEntry(BlockType.HERO, label_for(BlockType.HERO), "Main banner with title and CTA", "basic"),
    PaletteEntry(BlockType.ABOUT, label_for(BlockType.ABOUT), "About us section", "basic"),
    PaletteEntry(BlockType.CONTACT, label_for(BlockType.CONTACT), "Contact form and info", "basic"),
    PaletteEntry(BlockType.FOOTER, label_for(BlockType.FOOTER), "Footer with links", "basic"),
    PaletteEntry(BlockType.SERVICES, label_for(BlockType.SERVICES), "Services showcase", "content"),
    PaletteEntry(BlockType.GALLERY, label_for(BlockType.GALLERY), "Image gallery", "content"),
    PaletteEntry(BlockType.TESTIMONIALS, label_for(BlockType.TESTIMONIALS), "Customer reviews", "content"),
    PaletteEntry(BlockType.PRODUCTS, label_for(BlockType.PRODUCTS), "Product showcase", "content"),
)


def palette() -> list[PaletteEntry]:
    return list(_PALETTE)


def search_palette(query: str) -> dict[str, list[PaletteEntry]]:
    """Group palette entries whose label or description contains ``query``."""
    needle = query.strip().lower()
    grouped: dict[str, list[PaletteEntry]] = {}
    for entry in _PALETTE:
        if needle and needle not in entry.label.lower() and needle not in entry.description.lower():
            continue
        grouped.setdefault(entry.category, []).append(entry)
    return grouped


__all__ = ["PALETTE_CATEGORIES", "PaletteEntry", "palette", "search_palette"]
