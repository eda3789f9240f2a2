"""Errors raised by document model mutators."""

from __future__ import annotations


class DocumentError(RuntimeError):
    """Base class for document invariant violations."""


class DuplicateBlockIdError(DocumentError):
    """Raised when inserting a block whose id is already present."""

    def __init__(self, block_id: str):
        super().__init__(f"Block id {block_id!r} already exists in the document.")
        self.block_id = block_id


class IndexOutOfRangeError(DocumentError):
    """Raised when a position does not address a valid slot."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Index {index} is out of range for a document of {size} block(s).")
        self.index = index
        self.size = size


class BlockNotFoundError(DocumentError):
    """Raised when a block id does not exist in the document."""

    def __init__(self, block_id: str):
        super().__init__(f"Block {block_id!r} does not exist.")
        self.block_id = block_id


__all__ = [
    "BlockNotFoundError",
    "DocumentError",
    "DuplicateBlockIdError",
    "IndexOutOfRangeError",
]
