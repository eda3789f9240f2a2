"""Testimonials block content."""

from __future__ import annotations

from .base import BlockType, ContentRecord, ControlKind, SectionContent, content_field


class Testimonial(ContentRecord):
    name: str = content_field("", placeholder="Customer name")
    role: str = content_field("", placeholder="Role or company")
    quote: str = content_field("", control=ControlKind.TEXTAREA, placeholder="What did they say?")


def _default_testimonials() -> list[Testimonial]:
    return [
        Testimonial(
            name="Sarah Johnson",
            role="Founder, Bloom Studio",
            quote="Our new site was live in an afternoon and looks fantastic.",
        ),
        Testimonial(
            name="Michael Chen",
            role="Owner, Chen Consulting",
            quote="Editing sections is so simple that the whole team updates the page.",
        ),
    ]


class TestimonialsContent(SectionContent):
    block_type = BlockType.TESTIMONIALS

    title: str = content_field("What Our Clients Say")
    testimonials: list[Testimonial] = content_field(
        control=ControlKind.REPEATER,
        default_factory=_default_testimonials,
    )


__all__ = ["Testimonial", "TestimonialsContent"]
