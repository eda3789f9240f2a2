from __future__ import annotations

import pytest

from site_blocks.document import IndexOutOfRangeError
from site_blocks.models.blocks import create_block
from site_blocks.models.document import Document
from site_blocks.renderers import CanvasRenderer, RenderMode
from site_blocks.renderers.canvas import EMPTY_HINT, EMPTY_TITLE


@pytest.fixture
def canvas() -> CanvasRenderer:
    return CanvasRenderer()


@pytest.fixture
def doc() -> Document:
    hero = create_block("hero")
    about = create_block("about").model_copy(update={"visible": False})
    footer = create_block("footer")
    return Document(blocks=(hero, about, footer))


def test_edit_mode_lists_every_block_with_affordances(canvas: CanvasRenderer, doc: Document) -> None:
    selected = doc.blocks[2].id

    view = canvas.render(doc, selected_block_id=selected)

    assert [item.block_id for item in view.items] == doc.ids()
    assert [item.index for item in view.items] == [0, 1, 2]
    assert [item.visible for item in view.items] == [True, False, True]
    assert [item.selected for item in view.items] == [False, False, True]
    assert all(item.draggable for item in view.items)
    assert view.items[0].name == "Hero Section"
    assert "Welcome to Our Website" in view.items[0].html


def test_preview_mode_shows_visible_blocks_without_affordances(canvas: CanvasRenderer, doc: Document) -> None:
    view = canvas.render(doc, mode=RenderMode.PREVIEW, selected_block_id=doc.blocks[0].id)

    assert [item.block_id for item in view.items] == [doc.blocks[0].id, doc.blocks[2].id]
    assert not any(item.draggable or item.selected for item in view.items)
    assert view.hint is None


def test_empty_canvas_offers_a_hint(canvas: CanvasRenderer) -> None:
    view = canvas.render(Document())

    assert view.empty
    assert view.hint == (EMPTY_TITLE, EMPTY_HINT)
    assert EMPTY_TITLE == "Start Building Your Page"


def test_public_mode_is_not_a_canvas_mode(canvas: CanvasRenderer, doc: Document) -> None:
    with pytest.raises(ValueError):
        canvas.render(doc, mode=RenderMode.PUBLIC)


def test_drop_reorders_and_ignores_drops_outside(canvas: CanvasRenderer, doc: Document) -> None:
    moved = canvas.drop(doc, 0, 2)

    assert moved.ids() == [doc.ids()[1], doc.ids()[2], doc.ids()[0]]
    assert canvas.drop(doc, 0, None) is doc
    with pytest.raises(IndexOutOfRangeError):
        canvas.drop(doc, 0, 3)


def test_toolbar_actions(canvas: CanvasRenderer, doc: Document) -> None:
    hidden_id = doc.blocks[1].id

    shown = canvas.toggle_visibility(doc, hidden_id)
    assert shown.blocks[1].visible is True

    removed = canvas.delete(doc, hidden_id)
    assert hidden_id not in removed.ids()
    assert canvas.delete(removed, hidden_id) == removed
