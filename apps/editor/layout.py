"""Reusable layout helpers for the NiceGUI editor."""

from __future__ import annotations

from contextlib import contextmanager

from nicegui import ui

_NAV_LINKS = [
    ("Projects", "/"),
]


def _nav_bar(current: str, site_name: str) -> None:
    with ui.header().classes("bg-slate-900 text-white shadow-sm"):
        with ui.row().classes("w-full items-center justify-between px-6 py-3"):
            ui.link(text=site_name, target="/").classes("text-lg font-semibold no-underline text-white")
            with ui.row().classes("gap-4"):
                for label, href in _NAV_LINKS:
                    classes = "text-white no-underline"
                    if href != current:
                        classes = "text-white/70 hover:text-white no-underline"
                    ui.link(text=label, target=href).classes(classes)


@contextmanager
def page_frame(
    *,
    current: str,
    title: str,
    site_name: str,
    subtitle: str | None = None,
    wide: bool = False,
) -> None:
    """Render shared navigation and yield a central content column."""

    _nav_bar(current, site_name)
    width = "max-w-none" if wide else "max-w-6xl"
    with ui.column().classes(f"{width} mx-auto w-full gap-4 py-6 px-4"):
        ui.label(title).classes("text-3xl font-semibold text-slate-900")
        if subtitle:
            ui.label(subtitle).classes("text-slate-500")
        yield


def status_badge(status: str) -> None:
    colors = {"published": "positive", "draft": "grey", "archived": "warning"}
    ui.badge(status.capitalize(), color=colors.get(status, "grey"))


__all__ = ["page_frame", "status_badge"]
