from __future__ import annotations

import json
import logging

from site_blocks.models.blocks import Block, BlockType, create_block
from site_blocks.models.document import Document
from site_blocks.serialization import document_from_payload, document_to_payload, dumps, loads


def test_payload_shape(document_factory) -> None:
    doc = document_factory(("hero", "a"))

    payload = document_to_payload(doc)

    assert list(payload) == ["blocks"]
    assert payload["blocks"][0] == {
        "id": "a",
        "type": "hero",
        "name": "hero",
        "visible": True,
        "content": doc.blocks[0].content,
    }


def test_payload_never_writes_null_content() -> None:
    block = Block(id="h", type="hero", content={"title": None, "subtitle": "Hi"})

    payload = document_to_payload(Document(blocks=(block,)))

    assert payload["blocks"][0]["content"] == {"subtitle": "Hi"}
    assert "null" not in dumps(Document(blocks=(block,)))


def test_stamp_adds_last_modified() -> None:
    payload = document_to_payload(Document(), stamp=True)

    assert payload["blocks"] == []
    assert "T" in payload["lastModified"]


def test_dumps_and_loads_preserve_blocks() -> None:
    hero = create_block(BlockType.HERO)
    hidden = create_block("newsletter").model_copy(update={"visible": False, "content": {"headline": "Soon"}})
    doc = Document(blocks=(hero, hidden))

    restored = loads(dumps(doc, indent=2))

    assert restored == doc
    assert restored.blocks[1].type == "newsletter"
    assert restored.blocks[1].content == {"headline": "Soon"}


def test_loading_is_lenient(caplog) -> None:
    payload = {
        "blocks": [
            {"id": "a", "type": "hero", "name": "Top", "content": {"title": "Hi"}},
            "not a block",
            {"type": "about"},
            {"id": "a", "type": "footer"},
            {"id": "c", "type": "contact", "visible": "yes", "content": ["bad"]},
            {"id": "d"},
        ],
        "lastModified": "2024-01-01T00:00:00Z",
    }

    with caplog.at_level(logging.WARNING, logger="site_blocks.serialization"):
        doc = document_from_payload(payload)

    assert [block.type for block in doc.blocks] == ["hero", "about", "contact"]
    first, generated, contact = doc.blocks
    assert first.id == "a"
    assert first.visible is True
    assert first.name == "Top"
    assert generated.id.startswith("about_")
    assert generated.name == "about"
    assert contact.visible is True
    assert contact.content == {}
    assert any("duplicate" in record.getMessage() for record in caplog.records)


def test_missing_or_invalid_blocks_give_empty_document() -> None:
    assert document_from_payload({}) == Document()
    assert document_from_payload({"blocks": {"id": "a"}}) == Document()
    assert document_from_payload(None) == Document()
    assert loads("not json") == Document()
    assert loads(json.dumps([1, 2, 3])) == Document()


def test_unicode_content_survives() -> None:
    block = Block(id="a", type="about", content={"title": "Tentang Kami ✨"})

    text = dumps(Document(blocks=(block,)))

    assert "✨" in text
    assert loads(text).blocks[0].content["title"] == "Tentang Kami ✨"
