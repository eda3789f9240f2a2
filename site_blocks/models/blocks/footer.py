"""Footer block content."""

from __future__ import annotations

from .base import BlockType, ControlKind, SectionContent, content_field


class FooterContent(SectionContent):
    block_type = BlockType.FOOTER

    company_name: str = content_field("Your Company")
    description: str = content_field("Building amazing digital experiences", control=ControlKind.TEXTAREA)


__all__ = ["FooterContent"]
