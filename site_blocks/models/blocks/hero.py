"""Hero block content."""

from __future__ import annotations

from .base import BlockType, ControlKind, SectionContent, content_field

HERO_BACKGROUND = "https://images.pexels.com/photos/196644/pexels-photo-196644.jpeg"


class HeroContent(SectionContent):
    block_type = BlockType.HERO

    title: str = content_field("Welcome to Our Website", placeholder="Enter hero title")
    subtitle: str = content_field(
        "Create amazing experiences with our platform",
        control=ControlKind.TEXTAREA,
        placeholder="Enter hero subtitle",
    )
    button_text: str = content_field("Get Started", placeholder="Enter button text")
    button_url: str = content_field(
        "#",
        control=ControlKind.URL,
        label="Button URL",
        placeholder="https://wa.me/6281234567890 or any URL",
    )
    background_image: str = content_field(HERO_BACKGROUND, control=ControlKind.IMAGE)
    background_color: str = content_field("#7c3aed", control=ControlKind.COLOR)


__all__ = ["HeroContent"]
