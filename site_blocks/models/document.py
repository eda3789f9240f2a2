"""Document value type: the ordered blocks of one page."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .blocks.base import Block


class Document(BaseModel):
    """Immutable, ordered sequence of blocks; order is top-to-bottom render order."""

    blocks: tuple[Block, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    def ids(self) -> list[str]:
        return [block.id for block in self.blocks]

    def with_blocks(self, blocks: list[Block] | tuple[Block, ...]) -> Document:
        return self.model_copy(update={"blocks": tuple(blocks)})


__all__ = ["Document"]
