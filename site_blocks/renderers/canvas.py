"""Editable canvas: the structural view behind the drag-and-drop editor."""

from __future__ import annotations

from dataclasses import dataclass, field

from site_blocks.document import remove, reorder, toggle_visible
from site_blocks.models.blocks import Block
from site_blocks.models.document import Document

from .base import RenderMode, RenderOptions
from .html import HtmlRenderer

EMPTY_TITLE = "Start Building Your Page"
EMPTY_HINT = "Drag blocks from the sidebar to start creating your page"


@dataclass(frozen=True, slots=True)
class CanvasItem:
    block_id: str
    index: int
    name: str
    type: str
    visible: bool
    selected: bool
    draggable: bool
    html: str


@dataclass(frozen=True, slots=True)
class CanvasView:
    mode: RenderMode
    items: list[CanvasItem] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.items

    @property
    def hint(self) -> tuple[str, str] | None:
        if self.empty and self.mode is RenderMode.EDIT:
            return EMPTY_TITLE, EMPTY_HINT
        return None


@dataclass(slots=True)
class CanvasRenderer:
    """Builds canvas items; preview mode is a view flag over the same document."""

    html_renderer: HtmlRenderer = field(default_factory=HtmlRenderer)

    def render(
        self,
        document: Document,
        *,
        mode: RenderMode = RenderMode.EDIT,
        selected_block_id: str | None = None,
    ) -> CanvasView:
        if mode is RenderMode.PUBLIC:
            raise ValueError("The canvas renders edit or preview mode only.")
        editing = mode is RenderMode.EDIT
        options = RenderOptions(mode=mode, selected_block_id=selected_block_id if editing else None)
        items = [
            self._item(block, index, options, editing)
            for index, block in enumerate(self.html_renderer.blocks_for(document, mode))
        ]
        return CanvasView(mode=mode, items=items)

    def drop(self, document: Document, source_index: int, destination_index: int | None) -> Document:
        """Apply a drag-and-drop gesture; dropping outside the canvas changes nothing."""
        if destination_index is None:
            return document
        return reorder(document, source_index, destination_index)

    def delete(self, document: Document, block_id: str) -> Document:
        return remove(document, block_id)

    def toggle_visibility(self, document: Document, block_id: str) -> Document:
        return toggle_visible(document, block_id)

    def _item(self, block: Block, index: int, options: RenderOptions, editing: bool) -> CanvasItem:
        return CanvasItem(
            block_id=block.id,
            index=index,
            name=block.name,
            type=block.type,
            visible=block.visible,
            selected=editing and block.id == options.selected_block_id,
            draggable=editing,
            html=self.html_renderer.render_block(block, options=options),
        )


__all__ = ["CanvasItem", "CanvasRenderer", "CanvasView", "EMPTY_HINT", "EMPTY_TITLE"]
