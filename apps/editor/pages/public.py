"""Static page routes: published sites by slug and editor previews by id."""

from __future__ import annotations

from fastapi.responses import HTMLResponse
from nicegui import app

from site_blocks.renderers import RenderMode, RenderOptions
from site_blocks.store import ProjectNotFoundError

from ..state import get_context

_NOT_FOUND = "<!DOCTYPE html><html><body><h1>Page not found</h1></body></html>"


@app.get("/p/{slug}", response_class=HTMLResponse)
def public_page(slug: str) -> HTMLResponse:  # pragma: no cover - UI wiring
    ctx = get_context()
    try:
        project = ctx.store.get_published_by_slug(slug)
    except ProjectNotFoundError:
        return HTMLResponse(_NOT_FOUND, status_code=404)
    options = RenderOptions(
        mode=RenderMode.PUBLIC,
        page_title=project.title,
        description=project.description or None,
        site_name=ctx.settings.site_name,
    )
    return HTMLResponse(ctx.renderer.render_page(project.document, options=options))


@app.get("/preview/{project_id}", response_class=HTMLResponse)
def preview_page(project_id: str) -> HTMLResponse:  # pragma: no cover - UI wiring
    """Preview the live editing session when one exists, else the stored document."""
    ctx = get_context()
    try:
        project = ctx.store.get_project(project_id)
    except ProjectNotFoundError:
        return HTMLResponse(_NOT_FOUND, status_code=404)
    session = ctx.sessions.get(project_id)
    document = session.document if session is not None else project.document
    options = RenderOptions(
        mode=RenderMode.PREVIEW,
        page_title=project.title,
        description=project.description or None,
        site_name=ctx.settings.site_name,
    )
    return HTMLResponse(ctx.renderer.render_page(document, options=options))


__all__ = ["preview_page", "public_page"]
