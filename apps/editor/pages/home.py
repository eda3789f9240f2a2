"""Project list: create, open, publish, clone and delete projects."""

from __future__ import annotations

from nicegui import ui

from site_blocks.models.project import Project, ProjectStatus
from site_blocks.store import ProjectStoreError

from ..layout import page_frame, status_badge
from ..state import get_context


@ui.page("/")
def home_page() -> None:  # pragma: no cover - UI wiring
    ctx = get_context()

    with page_frame(
        current="/",
        title="Your Projects",
        site_name=ctx.settings.site_name,
        subtitle="Build pages from sections, preview them and publish when ready.",
    ):
        search_input = ui.input("Search projects...").props("clearable debounce=300").classes("min-w-[320px]")
        projects_container = ui.column().classes("gap-2 w-full")

        def refresh_projects() -> None:
            projects_container.clear()
            query = search_input.value or None
            projects = ctx.store.list_projects(search=query)
            with projects_container:
                if not projects:
                    ui.label("No matching projects." if query else "No projects yet. Create one to get started.")
                    return
                for project in projects:
                    _project_card(project, refresh_projects)

        with ui.card().classes("w-full p-4 shadow-sm"):
            ui.label("New project").classes("text-lg font-semibold")
            with ui.row().classes("w-full gap-3 items-end"):
                title_input = ui.input("Title").classes("min-w-[240px]")
                description_input = ui.input("Description").classes("flex-1")

                def create() -> None:
                    try:
                        project = ctx.store.create_project(
                            title_input.value or "",
                            description=description_input.value or "",
                        )
                    except ValueError as exc:
                        ui.notify(str(exc), color="negative")
                        return
                    ui.navigate.to(f"/editor/{project.id}")

                ui.button("Create", on_click=create)

        ui.separator()
        search_input.on_value_change(lambda _: refresh_projects())
        refresh_projects()


def _project_card(project: Project, refresh) -> None:
    ctx = get_context()
    with ui.card().classes("w-full shadow-sm p-4"):
        with ui.row().classes("items-center gap-3"):
            ui.label(project.title).classes("text-lg font-semibold")
            status_badge(project.status.value)
        if project.description:
            ui.label(project.description).classes("text-slate-600")
        with ui.row().classes("text-xs text-slate-500 gap-4"):
            ui.label(f"Slug: {project.slug}")
            ui.label(f"Sections: {len(project.document.blocks)}")
            if project.last_edited_time:
                ui.label(f"Updated: {project.last_edited_time:%Y-%m-%d %H:%M}")

        def run(action, message: str) -> None:
            try:
                action()
            except ProjectStoreError as exc:
                ui.notify(str(exc), color="negative")
                return
            ui.notify(message, color="positive")
            refresh()

        with ui.row().classes("gap-2 mt-2"):
            ui.button("Edit", on_click=lambda _, pid=project.id: ui.navigate.to(f"/editor/{pid}"))
            ui.button(
                "Preview",
                on_click=lambda _, pid=project.id: ui.navigate.to(f"/preview/{pid}", new_tab=True),
            ).props("outline")
            if project.is_published:
                ui.button(
                    "View live",
                    on_click=lambda _, slug=project.slug: ui.navigate.to(f"/p/{slug}", new_tab=True),
                ).props("outline")
                ui.button(
                    "Unpublish",
                    on_click=lambda: run(
                        lambda: ctx.store.set_status(project.id, ProjectStatus.DRAFT),
                        "Project unpublished successfully!",
                    ),
                ).props("flat")
            else:
                ui.button(
                    "Publish",
                    on_click=lambda: run(
                        lambda: ctx.store.set_status(project.id, ProjectStatus.PUBLISHED),
                        "Project published successfully!",
                    ),
                ).props("flat")
            ui.button(
                "Clone",
                on_click=lambda: run(lambda: ctx.store.clone_project(project.id), "Project cloned"),
            ).props("flat")
            ui.button(
                "Delete",
                on_click=lambda: run(lambda: _delete(project.id), "Project deleted"),
            ).props("flat color=negative")


def _delete(project_id: str) -> None:
    ctx = get_context()
    ctx.store.delete_project(project_id)
    ctx.sessions.discard(project_id)


__all__ = ["home_page"]
