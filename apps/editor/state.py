"""Shared NiceGUI editor state (settings, store, renderers, sessions)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from site_blocks.config import Settings, configure_logging, load_settings
from site_blocks.editor import EditorSession, SessionRegistry
from site_blocks.models.blocks import BlockType
from site_blocks.renderers import CanvasRenderer, HtmlRenderer, PropertyPanel
from site_blocks.startup import open_project_store
from site_blocks.store import ProjectRepository

logger = logging.getLogger(__name__)

SAMPLE_LAYOUT = (BlockType.HERO, BlockType.ABOUT, BlockType.SERVICES, BlockType.CONTACT, BlockType.FOOTER)


@dataclass(slots=True)
class EditorContext:
    settings: Settings
    store: ProjectRepository
    renderer: HtmlRenderer
    canvas: CanvasRenderer
    panel: PropertyPanel
    sessions: SessionRegistry

    def session_for(self, project_id: str) -> EditorSession:
        return self.sessions.open(project_id)


_CONTEXT: Optional[EditorContext] = None


def get_context() -> EditorContext:
    """Return a singleton editor context, seeding a sample project on first access."""

    global _CONTEXT
    if _CONTEXT is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        _CONTEXT = _bootstrap_context(settings)
    return _CONTEXT


def _bootstrap_context(settings: Settings) -> EditorContext:
    store = open_project_store(settings)
    _seed_sample_project(store)
    renderer = HtmlRenderer()
    return EditorContext(
        settings=settings,
        store=store,
        renderer=renderer,
        canvas=CanvasRenderer(renderer),
        panel=PropertyPanel(),
        sessions=SessionRegistry(store, history_limit=settings.history_limit),
    )


def _seed_sample_project(store: ProjectRepository) -> None:
    if store.list_projects():
        logger.info("Projects already present; skipping sample seed")
        return
    logger.info("Seeding sample project")
    project = store.create_project("Sample Website", description="A starter page with the basic sections.")
    session = EditorSession(store, project.id)
    session.load()
    for block_type in SAMPLE_LAYOUT:
        session.add_block(block_type)
    session.save()


__all__ = ["EditorContext", "get_context"]
