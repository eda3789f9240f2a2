"""About block content."""

from __future__ import annotations

from .base import BlockType, ControlKind, SectionContent, content_field


class AboutContent(SectionContent):
    block_type = BlockType.ABOUT

    title: str = content_field("About Us")
    description: str = content_field(
        "We are passionate about creating amazing digital experiences.",
        control=ControlKind.TEXTAREA,
    )
    image: str = content_field(
        "https://images.pexels.com/photos/3184291/pexels-photo-3184291.jpeg",
        control=ControlKind.IMAGE,
    )


__all__ = ["AboutContent"]
