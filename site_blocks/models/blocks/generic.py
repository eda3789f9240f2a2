"""Catch-all content for block types this version does not know."""

from __future__ import annotations

from .base import SectionContent


class GenericContent(SectionContent):
    pass


__all__ = ["GenericContent"]
