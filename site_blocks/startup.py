"""Startup helpers for bootstrapping a project store."""

from __future__ import annotations

from sqlalchemy.engine import Engine

from site_blocks.config import Settings
from site_blocks.db.engine import create_engine, create_session_factory
from site_blocks.db.schema import create_all
from site_blocks.models.project import Project
from site_blocks.store import ProjectRepository, create_project_store


def engine_from_settings(settings: Settings) -> Engine:
    """Build the engine named by ``DATABASE_URL`` or ``SITE_BLOCKS_SQLITE_PATH``."""
    return create_engine(settings.database_url, sqlite_path=settings.sqlite_path)


def open_project_store(settings: Settings) -> ProjectRepository:
    """Create the tables if needed and return a store bound to them."""
    engine = engine_from_settings(settings)
    create_all(engine)
    return create_project_store(create_session_factory(engine))


def ensure_project(store: ProjectRepository, *, title: str = "My Website") -> Project:
    """Return the most recently edited project, creating one if none exist."""
    existing = store.list_projects()
    if existing:
        return existing[0]
    return store.create_project(title)


__all__ = ["engine_from_settings", "ensure_project", "open_project_store"]
