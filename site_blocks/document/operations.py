"""Pure transformations over a page document.

Every operation returns a new ``Document`` and leaves its input untouched.
Mutators fail fast on invalid references, except ``remove`` which is
idempotent.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from site_blocks.models.blocks import Block, content_model_for
from site_blocks.models.document import Document

from .errors import BlockNotFoundError, DuplicateBlockIdError, IndexOutOfRangeError

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------- Lookups
def find_block(doc: Document, block_id: str) -> Block | None:
    for block in doc.blocks:
        if block.id == block_id:
            return block
    return None


def index_of(doc: Document, block_id: str) -> int:
    for index, block in enumerate(doc.blocks):
        if block.id == block_id:
            return index
    raise BlockNotFoundError(block_id)


def get_block(doc: Document, block_id: str) -> Block:
    return doc.blocks[index_of(doc, block_id)]


def list_visible(doc: Document) -> list[Block]:
    """Visible blocks in document order."""
    return [block for block in doc.blocks if block.visible]


# ---------------------------------------------------------------- Mutators
def insert(doc: Document, block: Block, at_index: int | None = None) -> Document:
    if find_block(doc, block.id) is not None:
        raise DuplicateBlockIdError(block.id)

    blocks = list(doc.blocks)
    if at_index is None:
        blocks.append(block)
    else:
        if not 0 <= at_index <= len(blocks):
            raise IndexOutOfRangeError(at_index, len(blocks))
        blocks.insert(at_index, block)

    logger.debug("Inserted block %s at %s", block.id, len(blocks) - 1 if at_index is None else at_index)
    return doc.with_blocks(blocks)


def reorder(doc: Document, from_index: int, to_index: int) -> Document:
    """Move the block at ``from_index`` so that it ends up at ``to_index``."""
    size = len(doc.blocks)
    for index in (from_index, to_index):
        if not 0 <= index < size:
            raise IndexOutOfRangeError(index, size)
    if from_index == to_index:
        return doc

    blocks = list(doc.blocks)
    moved = blocks.pop(from_index)
    blocks.insert(to_index, moved)
    logger.debug("Moved block %s from %d to %d", moved.id, from_index, to_index)
    return doc.with_blocks(blocks)


def update_content(doc: Document, block_id: str, field: str, value: Any) -> Document:
    """Replace a single content field of one block.

    The value is copied so later changes by the caller cannot reach the
    document. ``None`` removes the field, which then renders as its default.
    """
    index = index_of(doc, block_id)
    block = doc.blocks[index]
    if field not in content_model_for(block.type).wire_names():
        logger.debug("Field %r is not part of the %r schema; storing it anyway", field, block.type)

    content = dict(block.content)
    if value is None:
        content.pop(field, None)
    else:
        content[field] = copy.deepcopy(value)
    return _replace(doc, index, block.model_copy(update={"content": content}))


def set_visible(doc: Document, block_id: str, visible: bool) -> Document:
    index = index_of(doc, block_id)
    block = doc.blocks[index]
    if block.visible == visible:
        return doc
    return _replace(doc, index, block.model_copy(update={"visible": visible}))


def toggle_visible(doc: Document, block_id: str) -> Document:
    block = get_block(doc, block_id)
    return set_visible(doc, block_id, not block.visible)


def rename(doc: Document, block_id: str, name: str) -> Document:
    index = index_of(doc, block_id)
    block = doc.blocks[index]
    label = name if name and name.strip() else block.type
    return _replace(doc, index, block.model_copy(update={"name": label}))


def remove(doc: Document, block_id: str) -> Document:
    """Drop ``block_id``; unknown ids leave the document as it is."""
    if find_block(doc, block_id) is None:
        return doc
    logger.debug("Removed block %s", block_id)
    return doc.with_blocks([block for block in doc.blocks if block.id != block_id])


# ----------------------------------------------------------------- Helpers
def _replace(doc: Document, index: int, block: Block) -> Document:
    blocks = list(doc.blocks)
    blocks[index] = block
    return doc.with_blocks(blocks)


__all__ = [
    "find_block",
    "get_block",
    "index_of",
    "insert",
    "list_visible",
    "remove",
    "rename",
    "reorder",
    "set_visible",
    "toggle_visible",
    "update_content",
]
