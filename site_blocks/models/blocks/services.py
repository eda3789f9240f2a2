"""Services block content."""

from __future__ import annotations

from .base import BlockType, ContentRecord, ControlKind, SectionContent, content_field


class ServiceItem(ContentRecord):
    name: str = content_field("", placeholder="Service name")
    description: str = content_field("", control=ControlKind.TEXTAREA, placeholder="Service description")


def _default_services() -> list[ServiceItem]:
    return [
        ServiceItem(name="Web Design", description="Beautiful and responsive websites"),
        ServiceItem(name="Development", description="Custom web applications"),
        ServiceItem(name="SEO", description="Search engine optimization"),
    ]


class ServicesContent(SectionContent):
    block_type = BlockType.SERVICES

    title: str = content_field("Our Services", label="Section Title")
    services: list[ServiceItem] = content_field(
        control=ControlKind.REPEATER,
        default_factory=_default_services,
    )


__all__ = ["ServiceItem", "ServicesContent"]
