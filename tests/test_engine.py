from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import inspect

from site_blocks.config import Settings
from site_blocks.db.engine import DEFAULT_SQLITE_URL, create_engine, create_session_factory, resolve_url
from site_blocks.db.schema import create_all
from site_blocks.startup import open_project_store
from site_blocks.store import create_project_store


def test_projects_persist_in_sqlite_file_across_stores(tmp_path: Path) -> None:
    settings = Settings(sqlite_path=tmp_path / "site.db")

    created = open_project_store(settings).create_project("Bakery")
    reopened = open_project_store(settings)

    assert (tmp_path / "site.db").exists()
    assert reopened.get_project(created.id).slug == "bakery"


def test_settings_with_url_and_sqlite_path_cannot_open_a_store(tmp_path: Path) -> None:
    settings = Settings(database_url="sqlite:///other.db", sqlite_path=tmp_path / "site.db")

    with pytest.raises(ValueError):
        open_project_store(settings)
    assert not (tmp_path / "site.db").exists()


def test_resolve_url_defaults_to_memory() -> None:
    assert resolve_url() == DEFAULT_SQLITE_URL
    assert resolve_url("postgresql+psycopg://u:p@localhost/db") == "postgresql+psycopg://u:p@localhost/db"


def test_in_memory_database_is_shared_between_sessions() -> None:
    engine = create_engine()
    create_all(engine)
    factory = create_session_factory(engine)

    create_project_store(factory).create_project("Shared")

    assert "projects" in inspect(engine).get_table_names()
    assert [p.title for p in create_project_store(factory).list_projects()] == ["Shared"]
