"""Document model operations and errors."""

from .errors import BlockNotFoundError, DocumentError, DuplicateBlockIdError, IndexOutOfRangeError
from .operations import (
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

__all__ = [
    "BlockNotFoundError",
    "DocumentError",
    "DuplicateBlockIdError",
    "IndexOutOfRangeError",
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
