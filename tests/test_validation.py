from __future__ import annotations

from site_blocks.models.blocks import Block, BlockType, create_block
from site_blocks.models.document import Document
from site_blocks.validation import (
    MALFORMED_VALUE,
    UNKNOWN_FIELD,
    UNKNOWN_TYPE,
    validate_block,
    validate_document,
)


def test_fresh_blocks_have_no_warnings() -> None:
    doc = Document(blocks=tuple(create_block(block_type) for block_type in BlockType))

    assert validate_document(doc) == []


def test_unknown_type_is_reported_once() -> None:
    warnings = validate_block(Block(id="n1", type="newsletter", content={"title": "x"}))

    assert [(w.code, w.field) for w in warnings] == [(UNKNOWN_TYPE, None)]


def test_unknown_field_is_reported() -> None:
    block = Block(id="h1", type="hero", content={"title": "Hi", "ribbon": "New"})

    warnings = validate_block(block)

    assert [(w.block_id, w.field, w.code) for w in warnings] == [("h1", "ribbon", UNKNOWN_FIELD)]


def test_attribute_names_are_accepted_like_wire_names() -> None:
    block = Block(id="h1", type="hero", content={"button_text": "Go", "buttonUrl": "/start"})

    assert validate_block(block) == []
    assert block.resolved_content().button_text == "Go"

    malformed = Block(id="h2", type="hero", content={"button_text": ["Go"]})
    assert [(w.field, w.code) for w in validate_block(malformed)] == [("button_text", MALFORMED_VALUE)]


def test_malformed_values_are_reported() -> None:
    block = Block(
        id="s1",
        type="services",
        content={"title": 42, "services": [{"name": "Web", "description": ["bad"]}]},
    )

    warnings = validate_block(block)

    assert {(w.field, w.code) for w in warnings} == {
        ("title", MALFORMED_VALUE),
        ("services", MALFORMED_VALUE),
    }


def test_list_of_records_with_extra_keys_is_accepted() -> None:
    block = Block(
        id="g1",
        type="gallery",
        content={"images": [{"url": "https://example.com/a.jpg", "alt": "A", "caption": "extra"}]},
    )

    assert validate_block(block) == []


def test_validate_document_collects_every_block() -> None:
    doc = Document(
        blocks=(
            Block(id="a", type="hero", content={"title": None}),
            Block(id="b", type="mystery"),
        )
    )

    warnings = validate_document(doc)

    assert [(w.block_id, w.code) for w in warnings] == [("a", MALFORMED_VALUE), ("b", UNKNOWN_TYPE)]
