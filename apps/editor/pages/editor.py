"""Page editor: block palette, canvas and property panel around one session."""

from __future__ import annotations

import logging
from typing import Any

from nicegui import ui

from site_blocks.document import DocumentError
from site_blocks.editor import EditorSession
from site_blocks.models.blocks import PALETTE_CATEGORIES, ControlKind, search_palette
from site_blocks.renderers import CanvasView, FieldControl, RenderMode
from site_blocks.store import ProjectNotFoundError
from site_blocks.validation import validate_block

from ..layout import page_frame
from ..state import EditorContext, get_context

logger = logging.getLogger(__name__)

_INPUT_PROPS = {
    ControlKind.URL: "type=url",
    ControlKind.EMAIL: "type=email",
    ControlKind.TEL: "type=tel",
    ControlKind.IMAGE: "type=url",
}


@ui.page("/editor/{project_id}")
def editor_page(project_id: str) -> None:  # pragma: no cover - UI wiring
    ctx = get_context()
    try:
        project = ctx.store.get_project(project_id)
        session = ctx.session_for(project_id)
    except ProjectNotFoundError:
        with page_frame(current="/editor", title="Project not found", site_name=ctx.settings.site_name):
            ui.link("Back to projects", "/")
        return

    def refresh_all() -> None:
        canvas_view.refresh()
        panel_view.refresh()

    @ui.refreshable
    def palette_view(query: str = "") -> None:
        ui.label("Add Sections").classes("text-lg font-semibold")
        ui.input("Search blocks...", value=query, on_change=lambda e: palette_view.refresh(e.value or "")).props(
            "debounce=300"
        )
        for category, entries in search_palette(query).items():
            ui.label(PALETTE_CATEGORIES.get(category, category)).classes("text-sm font-semibold text-slate-500 mt-2")
            for entry in entries:
                with ui.card().classes("w-full p-3 cursor-pointer hover:bg-slate-50").on(
                    "click", lambda _, block_type=entry.type: _guard(lambda: session.add_block(block_type), refresh_all)
                ):
                    ui.label(entry.label).classes("font-medium")
                    ui.label(entry.description).classes("text-xs text-slate-500")

    @ui.refreshable
    def canvas_view() -> None:
        view = ctx.canvas.render(
            session.document,
            mode=session.view_mode,
            selected_block_id=session.selected_block_id,
        )
        _render_canvas(view, session, refresh_all)

    @ui.refreshable
    def panel_view() -> None:
        block = session.selected_block
        if block is None or session.view_mode is RenderMode.PREVIEW:
            ui.label("Select a section to edit its settings.").classes("text-slate-500")
            return
        panel = ctx.panel.render(block)
        ui.label(panel.title).classes("text-lg font-semibold")
        ui.input(
            "Section name",
            value=block.name,
            on_change=lambda e: _guard(lambda: session.rename(block.id, e.value or ""), canvas_view.refresh),
        ).props("debounce=400").classes("w-full")
        for warning in validate_block(block):
            ui.label(warning.message).classes("text-xs text-amber-700")
        for control in panel.controls:
            _render_control(ctx, session, block.id, control, refresh_all)

    with page_frame(
        current="/editor",
        title=project.title,
        site_name=ctx.settings.site_name,
        subtitle=f"/{project.slug} ({project.status.value})",
        wide=True,
    ):
        _toolbar(session, refresh_all)
        with ui.row().classes("w-full gap-4 items-start no-wrap"):
            with ui.column().classes("w-72 shrink-0 gap-2"):
                palette_view()
            with ui.column().classes("flex-1 gap-2 min-w-0"):
                canvas_view()
            with ui.column().classes("w-96 shrink-0 gap-2"):
                panel_view()


def _toolbar(session: EditorSession, refresh) -> None:  # pragma: no cover - UI wiring
    def save() -> None:
        result = session.save()
        ui.notify(result.message, color="positive" if result.ok else "negative")

    def step(action) -> None:
        if action():
            refresh()

    def close() -> None:
        if not get_context().sessions.close(session.project_id):
            ui.notify("Unsaved changes stay open until saved.", color="warning")
        ui.navigate.to("/")

    def toggle_preview() -> None:
        session.toggle_preview()
        preview_button.text = "Edit" if session.view_mode is RenderMode.PREVIEW else "Preview"
        refresh()

    with ui.row().classes("gap-2 items-center"):
        ui.button("Save", on_click=save)
        ui.button("Undo", on_click=lambda: step(session.undo)).props("outline")
        ui.button("Redo", on_click=lambda: step(session.redo)).props("outline")
        preview_button = ui.button("Preview", on_click=toggle_preview).props("outline")
        ui.button(
            "Open preview",
            on_click=lambda: ui.navigate.to(f"/preview/{session.project_id}", new_tab=True),
        ).props("flat")
        ui.button("Projects", on_click=close).props("flat")
        ui.label().bind_text_from(session, "dirty", backward=lambda dirty: "Unsaved changes" if dirty else "")


def _render_canvas(view: CanvasView, session: EditorSession, refresh) -> None:  # pragma: no cover - UI wiring
    if view.hint is not None:
        title, hint = view.hint
        with ui.column().classes("w-full items-center py-24 border-2 border-dashed rounded-lg"):
            ui.label(title).classes("text-xl font-semibold text-slate-700")
            ui.label(hint).classes("text-slate-500")
        return
    if view.empty:
        ui.label("No visible sections.").classes("text-slate-500")
        return

    last = len(view.items) - 1
    for item in view.items:
        classes = "w-full p-0 overflow-hidden"
        if item.selected:
            classes += " ring-2 ring-violet-600"
        if not item.visible:
            classes += " opacity-60"
        with ui.card().classes(classes):
            if item.draggable:
                with ui.row().classes("w-full items-center justify-between bg-slate-100 px-3 py-1"):
                    ui.label(item.name).classes("text-sm font-medium")
                    with ui.row().classes("gap-1"):
                        ui.button(icon="arrow_upward", on_click=lambda _, i=item.index: _guard(
                            lambda: session.move(i, i - 1), refresh
                        )).props("flat dense").set_enabled(item.index > 0)
                        ui.button(icon="arrow_downward", on_click=lambda _, i=item.index: _guard(
                            lambda: session.move(i, i + 1), refresh
                        )).props("flat dense").set_enabled(item.index < last)
                        ui.button(
                            icon="visibility" if item.visible else "visibility_off",
                            on_click=lambda _, bid=item.block_id: _guard(lambda: session.toggle_visible(bid), refresh),
                        ).props("flat dense")
                        ui.button(
                            icon="edit",
                            on_click=lambda _, bid=item.block_id: _guard(lambda: session.select(bid), refresh),
                        ).props("flat dense")
                        ui.button(
                            icon="delete",
                            on_click=lambda _, bid=item.block_id: _guard(lambda: session.delete_block(bid), refresh),
                        ).props("flat dense color=negative")
            ui.html(item.html, sanitize=False).classes("w-full")


def _render_control(
    ctx: EditorContext,
    session: EditorSession,
    block_id: str,
    control: FieldControl,
    refresh,
) -> None:  # pragma: no cover - UI wiring
    def commit(value: Any) -> None:
        _guard(lambda: session.replace_document(ctx.panel.edit_field(session.document, block_id, control.field, value)), refresh)

    if control.control is ControlKind.REPEATER:
        _render_repeater(ctx, session, block_id, control, refresh)
        return
    if control.control is ControlKind.TEXTAREA:
        element = ui.textarea(control.label, value=control.value or "", placeholder=control.placeholder)
    elif control.control is ControlKind.COLOR:
        element = ui.color_input(control.label, value=control.value or "")
    else:
        element = ui.input(control.label, value=control.value or "", placeholder=control.placeholder)
        props = _INPUT_PROPS.get(control.control)
        if props:
            element.props(props)
    element.props("debounce=400").classes("w-full")
    element.on_value_change(lambda e: commit(e.value))


def _render_repeater(
    ctx: EditorContext,
    session: EditorSession,
    block_id: str,
    control: FieldControl,
    refresh,
) -> None:  # pragma: no cover - UI wiring
    panel = ctx.panel
    with ui.expansion(control.label, value=True).classes("w-full shadow-sm"):
        for index, item in enumerate(control.items):
            with ui.card().classes("w-full p-2 gap-1"):
                for item_field in control.item_fields:
                    ui.input(
                        item_field.label,
                        value=str(item.get(item_field.field) or ""),
                        on_change=lambda e, i=index, name=item_field.field: _guard(
                            lambda: session.replace_document(
                                panel.edit_item(session.document, block_id, control.field, i, name, e.value)
                            ),
                            None,
                        ),
                    ).props("debounce=400 dense").classes("w-full")
                ui.button(
                    "Remove",
                    on_click=lambda _, i=index: _guard(
                        lambda: session.replace_document(
                            panel.remove_item(session.document, block_id, control.field, i)
                        ),
                        refresh,
                    ),
                ).props("flat dense color=negative")
        ui.button(
            f"Add {control.label.rstrip('s').lower() or 'item'}",
            on_click=lambda: _guard(
                lambda: session.replace_document(panel.add_item(session.document, block_id, control.field)),
                refresh,
            ),
        ).props("outline dense")


def _guard(action, refresh) -> None:  # pragma: no cover - UI wiring
    try:
        action()
    except (DocumentError, ValueError) as exc:
        logger.warning("Editor action failed: %s", exc)
        ui.notify(str(exc), color="negative")
        return
    if refresh is not None:
        refresh()


__all__ = ["editor_page"]
