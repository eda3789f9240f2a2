"""Contact block content."""

from __future__ import annotations

from .base import BlockType, ControlKind, SectionContent, content_field


class ContactContent(SectionContent):
    block_type = BlockType.CONTACT

    title: str = content_field("Contact Us")
    email: str = content_field("hello@example.com", control=ControlKind.EMAIL)
    phone: str = content_field("+1 (555) 123-4567", control=ControlKind.TEL, placeholder="+62 812 3456 7890")
    address: str = content_field("123 Main St, City, State 12345", control=ControlKind.TEXTAREA)


__all__ = ["ContactContent"]
