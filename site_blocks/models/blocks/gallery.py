"""Gallery block content."""

from __future__ import annotations

from .base import BlockType, ContentRecord, ControlKind, SectionContent, content_field


class GalleryImage(ContentRecord):
    url: str = content_field("", control=ControlKind.IMAGE, label="Image")
    alt: str = content_field("", label="Alt text")


def _default_images() -> list[GalleryImage]:
    return [
        GalleryImage(
            url="https://images.pexels.com/photos/3184291/pexels-photo-3184291.jpeg",
            alt="Team at work",
        ),
        GalleryImage(
            url="https://images.pexels.com/photos/196644/pexels-photo-196644.jpeg",
            alt="Design workspace",
        ),
        GalleryImage(
            url="https://images.pexels.com/photos/3183150/pexels-photo-3183150.jpeg",
            alt="Planning session",
        ),
    ]


class GalleryContent(SectionContent):
    block_type = BlockType.GALLERY

    title: str = content_field("Gallery")
    images: list[GalleryImage] = content_field(
        control=ControlKind.REPEATER,
        default_factory=_default_images,
    )


__all__ = ["GalleryContent", "GalleryImage"]
