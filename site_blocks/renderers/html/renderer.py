"""Renderer entry-point wiring HTML components."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from html import escape
from typing import Any, Mapping

from site_blocks.document import list_visible
from site_blocks.models.blocks import Block, BlockType
from site_blocks.models.document import Document
from site_blocks.renderers.base import RenderMode, RenderOptions, Renderer, RendererComponent

from .components import DEFAULT_COMPONENTS, GenericComponent

logger = logging.getLogger(__name__)

COMING_SOON = (
    '<div class="sb-empty">\n'
    "<h1>Coming Soon</h1>\n"
    "<p>This project is under construction.</p>\n"
    "</div>"
)

_STYLESHEET = """
body { margin: 0; font-family: system-ui, sans-serif; color: #111827; }
.sb-section { padding: 4rem 1rem; text-align: center; }
.sb-hero { min-height: 60vh; color: #fff; position: relative; display: flex; align-items: center; justify-content: center; }
.sb-hero__overlay { position: absolute; inset: 0; background: rgba(0, 0, 0, 0.4); }
.sb-hero__inner { position: relative; }
.sb-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 1.5rem; max-width: 72rem; margin: 0 auto; }
.sb-grid img, .sb-about__image { max-width: 100%; border-radius: 0.75rem; }
.sb-button { display: inline-block; padding: 0.75rem 2rem; background: #fff; color: #7c3aed; border-radius: 0.5rem; text-decoration: none; }
.sb-footer, .sb-contact { background: #111827; color: #fff; }
.sb-placeholder { background: #f3f4f6; color: #374151; }
.sb-empty { min-height: 80vh; display: flex; flex-direction: column; align-items: center; justify-content: center; }
.sb-branding { background: #f9fafb; padding: 1rem; text-align: center; font-size: 0.875rem; color: #6b7280; }
.sb-block { position: relative; margin-bottom: 1rem; outline: 1px dashed #d1d5db; }
.sb-block--selected { outline: 2px solid #7c3aed; }
.sb-block--hidden { opacity: 0.6; }
""".strip()


def _default_components() -> dict[BlockType, RendererComponent]:
    return dict(DEFAULT_COMPONENTS)


@dataclass(slots=True)
class HtmlRenderer(Renderer):
    """Renders blocks to HTML; one code path for edit, preview and public output."""

    _components: dict[BlockType, RendererComponent] = field(default_factory=dict)
    _fallback_component: RendererComponent | None = None

    def __post_init__(self) -> None:
        if not self._components:
            self._components = _default_components()
        if self._fallback_component is None:
            self._fallback_component = GenericComponent()

    def register(self, block_type: BlockType, component: RendererComponent) -> None:
        self._components[block_type] = component

    def blocks_for(self, document: Document, mode: RenderMode) -> list[Block]:
        """Blocks shown in ``mode``: everything while editing, visible ones otherwise."""
        if mode is RenderMode.EDIT:
            return list(document.blocks)
        return list_visible(document)

    def render_block(
        self,
        block: Block,
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        opts = options or RenderOptions()
        return self._render_block(block, opts, dict(kwargs))

    def render_document(
        self,
        document: Document,
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        """Render the body markup for ``document`` without the page shell."""
        opts = options or RenderOptions()
        extra = dict(kwargs)
        blocks = self.blocks_for(document, opts.mode)
        if not blocks and opts.mode is not RenderMode.EDIT:
            return COMING_SOON

        sections: list[str] = []
        for index, block in enumerate(blocks):
            rendered = self._render_block(block, opts, extra)
            if opts.editing:
                rendered = _with_affordances(block, index, rendered, opts)
            sections.append(rendered)
        return "\n".join(sections)

    def render_page(
        self,
        document: Document,
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        """Render a complete HTML page for ``document``."""
        opts = options or RenderOptions()
        body = self.render_document(document, options=opts, **kwargs)
        title = escape(opts.page_title or opts.site_name)
        head = [
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{title}</title>",
        ]
        if opts.description:
            head.append(f'<meta name="description" content="{escape(opts.description)}">')
        head.append(f"<style>\n{_STYLESHEET}\n</style>")

        branding = ""
        if opts.show_branding and opts.mode is RenderMode.PUBLIC:
            branding = f'<div class="sb-branding">Powered by {escape(opts.site_name)}</div>'

        return "\n".join(
            [
                "<!DOCTYPE html>",
                '<html lang="en">',
                "<head>",
                *head,
                "</head>",
                "<body>",
                body,
                branding,
                "</body>",
                "</html>",
            ]
        )

    # Internal helpers -------------------------------------------------
    def _render_block(
        self,
        block: Block,
        options: RenderOptions,
        extra: Mapping[str, Any],
    ) -> str:
        block_type = block.block_type
        component = self._components.get(block_type) if block_type is not None else None
        if component is None:
            component = self._fallback_component
        assert component is not None, "Fallback component must be configured"
        try:
            return component.render(block, engine=self, options=options, extra=extra)
        except Exception:
            logger.exception("Rendering block %s (%s) failed; using placeholder", block.id, block.type)
            assert self._fallback_component is not None
            return self._fallback_component.render(block, engine=self, options=options, extra=extra)


def _with_affordances(block: Block, index: int, rendered: str, options: RenderOptions) -> str:
    classes = ["sb-block"]
    if block.id == options.selected_block_id:
        classes.append("sb-block--selected")
    if not block.visible:
        classes.append("sb-block--hidden")
    visibility_label = "Hide section" if block.visible else "Show section"
    toolbar = "\n".join(
        [
            '<div class="sb-block__toolbar">',
            '<span class="sb-block__handle" data-drag-handle="true">&#8942;&#8942;</span>',
            f'<span class="sb-block__name">{escape(block.name)}</span>',
            f'<button type="button" data-action="toggle-visibility" title="{visibility_label}"></button>',
            '<button type="button" data-action="edit" title="Edit section"></button>',
            '<button type="button" data-action="delete" title="Delete section"></button>',
            "</div>",
        ]
    )
    return (
        f'<div class="{" ".join(classes)}" data-block-id="{escape(block.id)}" data-index="{index}" '
        f'data-visible="{str(block.visible).lower()}" draggable="true">\n{toolbar}\n{rendered}\n</div>'
    )


__all__ = ["COMING_SOON", "HtmlRenderer"]
