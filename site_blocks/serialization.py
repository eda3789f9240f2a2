"""JSON payload codec for documents: ``{"blocks": [...]}``.

Loading is lenient because stored payloads outlive schema changes: bad
entries are skipped or repaired with a warning rather than rejected.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import ValidationError

from site_blocks.models.blocks import Block, new_block_id
from site_blocks.models.document import Document

logger = logging.getLogger(__name__)


def block_to_payload(block: Block) -> dict[str, Any]:
    return {
        "id": block.id,
        "type": block.type,
        "name": block.name,
        "visible": block.visible,
        "content": {str(key): _jsonable(value) for key, value in block.content.items() if value is not None},
    }


def document_to_payload(doc: Document, *, stamp: bool = False) -> dict[str, Any]:
    payload: dict[str, Any] = {"blocks": [block_to_payload(block) for block in doc.blocks]}
    if stamp:
        payload["lastModified"] = datetime.now(timezone.utc).isoformat()
    return payload


def block_from_payload(entry: Mapping[str, Any]) -> Block | None:
    block_type = entry.get("type")
    if not isinstance(block_type, str) or not block_type.strip():
        logger.warning("Skipping block without a type: %r", entry.get("id"))
        return None

    block_id = entry.get("id")
    if not isinstance(block_id, str) or not block_id.strip():
        block_id = new_block_id(block_type)
        logger.warning("Block of type %r had no id; assigned %s", block_type, block_id)

    content = entry.get("content")
    if not isinstance(content, dict):
        if content is not None:
            logger.warning("Block %s has non-object content; using defaults", block_id)
        content = {}

    visible = entry.get("visible", True)
    try:
        return Block(
            id=block_id,
            type=block_type,
            name=entry.get("name") if isinstance(entry.get("name"), str) else "",
            visible=visible if isinstance(visible, bool) else True,
            content=content,
        )
    except ValidationError as exc:
        logger.warning("Skipping malformed block %s: %s", block_id, exc)
        return None


def document_from_payload(payload: Mapping[str, Any] | None) -> Document:
    if not isinstance(payload, Mapping):
        return Document()
    entries = payload.get("blocks")
    if not isinstance(entries, list):
        if entries is not None:
            logger.warning("Payload 'blocks' is not a list; loading an empty document")
        return Document()

    blocks: list[Block] = []
    seen: set[str] = set()
    for entry in entries:
        if not isinstance(entry, Mapping):
            logger.warning("Skipping non-object block entry: %r", entry)
            continue
        block = block_from_payload(entry)
        if block is None:
            continue
        if block.id in seen:
            logger.warning("Dropping duplicate block id %s", block.id)
            continue
        seen.add(block.id)
        blocks.append(block)
    return Document(blocks=tuple(blocks))


def dumps(doc: Document, *, indent: int | None = None, stamp: bool = False) -> str:
    return json.dumps(document_to_payload(doc, stamp=stamp), indent=indent, ensure_ascii=False)


def loads(text: str | bytes) -> Document:
    """Decode a JSON payload; text that is not valid JSON yields an empty document."""
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as exc:
        logger.warning("Could not decode document payload: %s", exc)
        return Document()
    return document_from_payload(payload)


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(key): _jsonable(val) for key, val in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_jsonable(item) for item in value]
    return str(value)


__all__ = [
    "block_from_payload",
    "block_to_payload",
    "document_from_payload",
    "document_to_payload",
    "dumps",
    "loads",
]
