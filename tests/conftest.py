from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Callable

import pytest
from sqlalchemy.engine import Engine

from site_blocks.db.engine import create_engine, create_session_factory
from site_blocks.db.schema import Base, DbProject, create_all
from site_blocks.models.blocks import Block, BlockType, get_default_content
from site_blocks.models.document import Document
from site_blocks.store import ProjectRepository, create_project_store


@pytest.fixture(scope="session")
def postgres_url() -> str | None:
    """Return the Postgres test URL if provided via env."""
    return os.getenv("POSTGRES_TEST_URL")


@pytest.fixture
def engine(postgres_url: str | None) -> Iterator[Engine]:
    """Yield an engine targeting Postgres when configured; otherwise SQLite in-memory."""
    engine = create_engine(postgres_url) if postgres_url else create_engine()
    create_all(engine)
    try:
        yield engine
    finally:
        with engine.begin() as connection:
            if engine.dialect.name == "sqlite":
                Base.metadata.drop_all(bind=connection)
            else:
                connection.execute(DbProject.__table__.delete())
        engine.dispose()


@pytest.fixture
def session_factory(engine: Engine):
    return create_session_factory(engine)


@pytest.fixture
def repository(session_factory) -> ProjectRepository:
    return create_project_store(session_factory)


@pytest.fixture
def block_factory() -> Callable[..., Block]:
    counter = iter(range(1, 10_000))

    def _factory(
        block_type: BlockType | str = BlockType.HERO,
        *,
        block_id: str | None = None,
        name: str | None = None,
        visible: bool = True,
        content: dict[str, Any] | None = None,
    ) -> Block:
        tag = block_type.value if isinstance(block_type, BlockType) else block_type
        return Block(
            id=block_id or f"{tag}-{next(counter)}",
            type=block_type,
            name=name or "",
            visible=visible,
            content=get_default_content(block_type) if content is None else content,
        )

    return _factory


@pytest.fixture
def document_factory(block_factory) -> Callable[..., Document]:
    """Build a document from ``(type, id)`` pairs or ready-made blocks."""

    def _factory(*entries: Block | tuple[BlockType | str, str]) -> Document:
        blocks = []
        for entry in entries:
            if isinstance(entry, Block):
                blocks.append(entry)
            else:
                block_type, block_id = entry
                blocks.append(block_factory(block_type, block_id=block_id))
        return Document(blocks=tuple(blocks))

    return _factory
