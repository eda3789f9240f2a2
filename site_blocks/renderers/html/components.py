"""HTML renderer component implementations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from html import escape
from typing import Any, Mapping, Sequence, TYPE_CHECKING
from urllib.parse import quote, urlsplit

from site_blocks.models.blocks import (
    AboutContent,
    Block,
    BlockType,
    ContactContent,
    FooterContent,
    GalleryContent,
    HeroContent,
    ProductsContent,
    SectionContent,
    ServicesContent,
    TestimonialsContent,
)
from site_blocks.renderers.base import RenderOptions, RendererComponent

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .renderer import HtmlRenderer


# ---------------------------------------------------------------------------
# Rendering context & base component


@dataclass(slots=True)
class RenderContext:
    engine: "HtmlRenderer"
    options: RenderOptions
    extra: Mapping[str, Any]

    def text(self, content: SectionContent, attribute: str) -> str:
        """Escaped field text, falling back to the type default when blank."""
        value = content.value_or_default(attribute)
        return escape("" if value is None else str(value))

    def url(self, content: SectionContent, attribute: str) -> str:
        return safe_url(content.value_or_default(attribute))

    def join(self, sections: Sequence[str]) -> str:
        return "\n".join(section for section in sections if section and section.strip())

    def section(self, block: Block, body: str, *, css: str, tag: str = "section", style: str = "") -> str:
        style_attr = f' style="{escape(style)}"' if style else ""
        return (
            f'<{tag} class="sb-section sb-{css}" id="{escape(block.id)}" data-block-type="{escape(block.type)}"'
            f"{style_attr}>\n{body}\n</{tag}>"
        )


class BaseComponent(RendererComponent):
    def render(
        self,
        block: Block,
        *,
        engine: "HtmlRenderer",
        options: RenderOptions,
        extra: Mapping[str, Any],
    ) -> str:
        ctx = RenderContext(engine=engine, options=options, extra=extra)
        return self.render_block(block, block.resolved_content(), ctx)

    def render_block(
        self, block: Block, content: SectionContent, ctx: RenderContext
    ) -> str:  # pragma: no cover - abstract
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Component implementations


_HERO_COLOR = HeroContent.model_fields["background_color"].default


class HeroComponent(BaseComponent):
    def render_block(self, block: Block, content: HeroContent, ctx: RenderContext) -> str:
        background = ctx.url(content, "background_image")
        color = safe_color(content.value_or_default("background_color"), _HERO_COLOR)
        style = f"background-color: {color};"
        if background != "#":
            style += (
                f" background-image: url('{css_url(background)}');"
                " background-size: cover; background-position: center;"
            )
        body = ctx.join(
            [
                '<div class="sb-hero__overlay"></div>',
                '<div class="sb-hero__inner">',
                f"<h1>{ctx.text(content, 'title')}</h1>",
                f"<p>{ctx.text(content, 'subtitle')}</p>",
                f'<a class="sb-button" href="{escape(ctx.url(content, "button_url"))}">'
                f"{ctx.text(content, 'button_text')}</a>",
                "</div>",
            ]
        )
        return ctx.section(block, body, css="hero", style=style)


class AboutComponent(BaseComponent):
    def render_block(self, block: Block, content: AboutContent, ctx: RenderContext) -> str:
        body = ctx.join(
            [
                '<div class="sb-about__text">',
                f"<h2>{ctx.text(content, 'title')}</h2>",
                f"<p>{ctx.text(content, 'description')}</p>",
                "</div>",
                f'<img class="sb-about__image" src="{escape(ctx.url(content, "image"))}" alt="About">',
            ]
        )
        return ctx.section(block, body, css="about")


class ServicesComponent(BaseComponent):
    def render_block(self, block: Block, content: ServicesContent, ctx: RenderContext) -> str:
        cards = [
            ctx.join(
                [
                    '<div class="sb-card">',
                    f"<h3>{escape(service.name)}</h3>",
                    f"<p>{escape(service.description)}</p>",
                    "</div>",
                ]
            )
            for service in content.services
        ]
        body = ctx.join(
            [f"<h2>{ctx.text(content, 'title')}</h2>", '<div class="sb-grid">', *cards, "</div>"]
        )
        return ctx.section(block, body, css="services")


class ContactComponent(BaseComponent):
    def render_block(self, block: Block, content: ContactContent, ctx: RenderContext) -> str:
        entries = [
            ("Email", ctx.text(content, "email")),
            ("Phone", ctx.text(content, "phone")),
            ("Address", ctx.text(content, "address")),
        ]
        items = [
            f'<div class="sb-contact__item"><h3>{label}</h3><p>{value}</p></div>'
            for label, value in entries
        ]
        body = ctx.join(
            [f"<h2>{ctx.text(content, 'title')}</h2>", '<div class="sb-grid">', *items, "</div>"]
        )
        return ctx.section(block, body, css="contact")


class GalleryComponent(BaseComponent):
    def render_block(self, block: Block, content: GalleryContent, ctx: RenderContext) -> str:
        images = [
            f'<img src="{escape(safe_url(image.url))}" alt="{escape(image.alt or f"Gallery image {index}")}">'
            for index, image in enumerate(content.images, start=1)
            if image.url
        ]
        body = ctx.join(
            [f"<h2>{ctx.text(content, 'title')}</h2>", '<div class="sb-grid">', *images, "</div>"]
        )
        return ctx.section(block, body, css="gallery")


class TestimonialsComponent(BaseComponent):
    def render_block(self, block: Block, content: TestimonialsContent, ctx: RenderContext) -> str:
        quotes = []
        for testimonial in content.testimonials:
            attribution = escape(testimonial.name)
            if testimonial.role:
                attribution += f", {escape(testimonial.role)}"
            quotes.append(
                f'<blockquote class="sb-card"><p>{escape(testimonial.quote)}</p>'
                f"<cite>{attribution}</cite></blockquote>"
            )
        body = ctx.join(
            [f"<h2>{ctx.text(content, 'title')}</h2>", '<div class="sb-grid">', *quotes, "</div>"]
        )
        return ctx.section(block, body, css="testimonials")


class ProductsComponent(BaseComponent):
    def render_block(self, block: Block, content: ProductsContent, ctx: RenderContext) -> str:
        cards = []
        for product in content.products:
            parts = ['<div class="sb-card">']
            if product.image:
                parts.append(f'<img src="{escape(safe_url(product.image))}" alt="{escape(product.name)}">')
            parts.append(f"<h3>{escape(product.name)}</h3>")
            if product.price:
                parts.append(f'<p class="sb-price">{escape(product.price)}</p>')
            parts.append(f"<p>{escape(product.description)}</p>")
            parts.append("</div>")
            cards.append(ctx.join(parts))
        body = ctx.join(
            [f"<h2>{ctx.text(content, 'title')}</h2>", '<div class="sb-grid">', *cards, "</div>"]
        )
        return ctx.section(block, body, css="products")


class FooterComponent(BaseComponent):
    def render_block(self, block: Block, content: FooterContent, ctx: RenderContext) -> str:
        if content.company_name.strip():
            company = escape(content.company_name)
        elif ctx.options.page_title:
            company = escape(ctx.options.page_title)
        else:
            company = ctx.text(content, "company_name")
        year = ctx.options.year or date.today().year
        body = ctx.join(
            [
                f"<h3>{company}</h3>",
                f"<p>{ctx.text(content, 'description')}</p>",
                f'<p class="sb-copyright">&copy; {year} {company}. All rights reserved.</p>',
            ]
        )
        return ctx.section(block, body, css="footer", tag="footer")


class GenericComponent(BaseComponent):
    """Neutral placeholder for block types without a dedicated component."""

    def render_block(self, block: Block, content: SectionContent, ctx: RenderContext) -> str:  # noqa: ARG002
        body = ctx.join(
            [
                f"<h3>{escape(block.name or block.type)}</h3>",
                f"<p>Preview for {escape(block.type)} section</p>",
            ]
        )
        return ctx.section(block, body, css="placeholder")


# ---------------------------------------------------------------------------
# Helpers


_SAFE_SCHEMES = {"", "http", "https", "mailto", "tel"}


def safe_url(value: Any) -> str:
    """Return ``value`` when it is a usable link target, otherwise ``#``."""
    if not isinstance(value, str) or not value.strip():
        return "#"
    candidate = value.strip()
    try:
        scheme = urlsplit(candidate).scheme.lower()
    except ValueError:
        return "#"
    return candidate if scheme in _SAFE_SCHEMES else "#"


_COLOR_PATTERN = re.compile(r"^(#[0-9a-fA-F]{3,8}|[a-zA-Z]{3,20})$")


def safe_color(value: Any, default: str) -> str:
    """Return ``value`` when it is a hex or named CSS colour, otherwise ``default``."""
    if isinstance(value, str) and _COLOR_PATTERN.match(value.strip()):
        return value.strip()
    return default


def css_url(value: str) -> str:
    """Percent-encode characters that could end a quoted CSS ``url()`` value."""
    return quote(value, safe=":/?#[]@!$&*+,;=%~-._")


DEFAULT_COMPONENTS: dict[BlockType, RendererComponent] = {
    BlockType.HERO: HeroComponent(),
    BlockType.ABOUT: AboutComponent(),
    BlockType.SERVICES: ServicesComponent(),
    BlockType.CONTACT: ContactComponent(),
    BlockType.GALLERY: GalleryComponent(),
    BlockType.TESTIMONIALS: TestimonialsComponent(),
    BlockType.PRODUCTS: ProductsComponent(),
    BlockType.FOOTER: FooterComponent(),
}


__all__ = [
    "DEFAULT_COMPONENTS",
    "GenericComponent",
    "RenderContext",
    "css_url",
    "safe_color",
    "safe_url",
]
