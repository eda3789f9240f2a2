from __future__ import annotations

import pytest

from site_blocks.document import (
    BlockNotFoundError,
    DuplicateBlockIdError,
    IndexOutOfRangeError,
    find_block,
    get_block,
    index_of,
    insert,
    list_visible,
    remove,
    rename,
    reorder,
    set_visible,
    toggle_visible,
    update_content,
)
from site_blocks.models.blocks import BlockType, create_block
from site_blocks.models.document import Document


def test_insert_appends_by_default(block_factory) -> None:
    doc = insert(Document(), block_factory(BlockType.HERO, block_id="a"))
    doc = insert(doc, block_factory(BlockType.ABOUT, block_id="b"))

    assert doc.ids() == ["a", "b"]


def test_insert_at_index_shifts_later_blocks(document_factory, block_factory) -> None:
    doc = document_factory(("hero", "a"), ("about", "b"))

    updated = insert(doc, block_factory(BlockType.CONTACT, block_id="c"), at_index=1)

    assert updated.ids() == ["a", "c", "b"]
    assert doc.ids() == ["a", "b"]
    assert insert(doc, block_factory(block_id="z"), at_index=2).ids() == ["a", "b", "z"]


def test_insert_rejects_duplicate_ids_and_bad_indices(document_factory, block_factory) -> None:
    doc = document_factory(("hero", "a"))

    with pytest.raises(DuplicateBlockIdError) as excinfo:
        insert(doc, block_factory(BlockType.ABOUT, block_id="a"))
    assert excinfo.value.block_id == "a"

    with pytest.raises(IndexOutOfRangeError) as excinfo:
        insert(doc, block_factory(block_id="b"), at_index=2)
    assert excinfo.value.index == 2
    assert excinfo.value.size == 1

    with pytest.raises(IndexOutOfRangeError):
        insert(doc, block_factory(block_id="b"), at_index=-1)


def test_reorder_moves_one_block(document_factory) -> None:
    doc = document_factory(("hero", "a"), ("about", "b"), ("services", "c"), ("footer", "d"))

    assert reorder(doc, 0, 1).ids() == ["b", "a", "c", "d"]
    assert reorder(doc, 3, 0).ids() == ["d", "a", "b", "c"]
    assert reorder(doc, 0, 3).ids() == ["b", "c", "d", "a"]
    assert reorder(doc, 2, 2) == doc


def test_reorder_round_trip_restores_order(document_factory) -> None:
    doc = document_factory(("hero", "a"), ("about", "b"), ("services", "c"), ("footer", "d"))

    for i in range(4):
        for j in range(4):
            assert reorder(reorder(doc, i, j), j, i).ids() == doc.ids()


def test_reorder_rejects_invalid_positions(document_factory) -> None:
    doc = document_factory(("hero", "a"), ("about", "b"))

    with pytest.raises(IndexOutOfRangeError):
        reorder(doc, 0, 2)
    with pytest.raises(IndexOutOfRangeError):
        reorder(doc, -1, 0)
    with pytest.raises(IndexOutOfRangeError):
        reorder(Document(), 0, 0)


def test_update_content_replaces_one_field(document_factory) -> None:
    doc = document_factory(("hero", "a"))

    updated = update_content(doc, "a", "title", "Welcome")

    assert get_block(updated, "a").content["title"] == "Welcome"
    assert get_block(updated, "a").content["subtitle"] == "Create amazing experiences with our platform"
    assert get_block(doc, "a").content["title"] == "Welcome to Our Website"


def test_update_content_accepts_fields_outside_the_schema(document_factory) -> None:
    doc = document_factory(("hero", "a"))

    updated = update_content(doc, "a", "ribbon", "New!")

    assert get_block(updated, "a").content["ribbon"] == "New!"


def test_update_content_copies_the_value(document_factory) -> None:
    doc = document_factory(("services", "s"))
    items = [{"name": "Apps", "description": "Mobile"}]

    updated = update_content(doc, "s", "services", items)
    items.append({"name": "Later", "description": "Not saved"})
    items[0]["name"] = "Changed"

    assert get_block(updated, "s").content["services"] == [{"name": "Apps", "description": "Mobile"}]


def test_update_content_with_none_removes_the_field(document_factory) -> None:
    doc = document_factory(("hero", "a"))

    updated = update_content(doc, "a", "title", None)

    assert "title" not in get_block(updated, "a").content
    assert get_block(updated, "a").resolved_content().title == "Welcome to Our Website"
    assert update_content(updated, "a", "title", None) == updated


def test_update_content_unknown_block_leaves_document_untouched(document_factory) -> None:
    doc = document_factory(("hero", "a"))
    snapshot = doc.model_copy(deep=True)

    with pytest.raises(BlockNotFoundError) as excinfo:
        update_content(doc, "nonexistent-id", "title", "x")

    assert excinfo.value.block_id == "nonexistent-id"
    assert doc == snapshot


def test_visibility_helpers(document_factory) -> None:
    doc = document_factory(("hero", "a"), ("about", "b"))

    hidden = set_visible(doc, "b", False)
    assert get_block(hidden, "b").visible is False
    assert set_visible(hidden, "b", False) is hidden
    assert get_block(toggle_visible(hidden, "b"), "b").visible is True

    with pytest.raises(BlockNotFoundError):
        set_visible(doc, "missing", True)
    with pytest.raises(BlockNotFoundError):
        toggle_visible(doc, "missing")


def test_list_visible_filters_and_preserves_order(block_factory) -> None:
    a = block_factory(BlockType.HERO, block_id="A")
    b = block_factory(BlockType.ABOUT, block_id="B", visible=False)
    c = block_factory(BlockType.FOOTER, block_id="C")

    assert list_visible(Document(blocks=(a, b))) == [a]
    visible = list_visible(Document(blocks=(a, b, c)))
    assert [block.id for block in visible] == ["A", "C"]
    assert all(block.visible for block in visible)


def test_remove_is_idempotent(document_factory) -> None:
    doc = document_factory(("hero", "a"), ("about", "b"))

    once = remove(doc, "a")
    twice = remove(once, "a")

    assert once.ids() == ["b"]
    assert twice == once
    assert remove(doc, "missing") is doc


def test_rename_falls_back_to_type(document_factory) -> None:
    doc = document_factory(("hero", "a"))

    assert get_block(rename(doc, "a", "Landing"), "a").name == "Landing"
    assert get_block(rename(doc, "a", ""), "a").name == "hero"
    with pytest.raises(BlockNotFoundError):
        rename(doc, "missing", "x")


def test_lookup_helpers(document_factory) -> None:
    doc = document_factory(("hero", "a"), ("about", "b"))

    assert index_of(doc, "b") == 1
    assert find_block(doc, "missing") is None
    assert get_block(doc, "a").type == "hero"
    with pytest.raises(BlockNotFoundError):
        index_of(doc, "missing")


def test_operations_work_with_created_blocks() -> None:
    hero = create_block(BlockType.HERO)
    about = create_block(BlockType.ABOUT)

    doc = insert(insert(Document(), hero), about, at_index=0)

    assert doc.ids() == [about.id, hero.id]
