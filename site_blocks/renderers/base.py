"""Renderer interfaces and shared options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Protocol

from site_blocks.models.blocks import Block
from site_blocks.models.document import Document


class RenderMode(str, Enum):
    """Which blocks are shown and whether editing affordances are attached."""

    EDIT = "edit"
    PREVIEW = "preview"
    PUBLIC = "public"


@dataclass(slots=True)
class RenderOptions:
    mode: RenderMode = RenderMode.PUBLIC
    selected_block_id: str | None = None
    page_title: str | None = None
    description: str | None = None
    site_name: str = "Site Blocks"
    show_branding: bool = True
    year: int | None = None

    @property
    def editing(self) -> bool:
        return self.mode is RenderMode.EDIT


class Renderer(Protocol):
    def render_block(self, block: Block, *, options: RenderOptions | None = None) -> str:
        ...

    def render_document(self, document: Document, *, options: RenderOptions | None = None) -> str:
        ...


class RendererComponent(Protocol):
    def render(
        self,
        block: Block,
        *,
        engine: Renderer,
        options: RenderOptions,
        extra: Mapping[str, Any],
    ) -> str:
        ...


__all__ = ["RenderMode", "RenderOptions", "Renderer", "RendererComponent"]
