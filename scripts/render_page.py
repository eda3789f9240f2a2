"""Render a page document to a static HTML file.

The document comes from a JSON payload file (``{"blocks": [...]}``) or from
a stored project, addressed by id or by published slug.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from site_blocks.config import configure_logging, load_settings
from site_blocks.renderers import HtmlRenderer, RenderMode, RenderOptions
from site_blocks.serialization import loads
from site_blocks.startup import open_project_store
from site_blocks.store import ProjectNotFoundError
from site_blocks.validation import validate_document

logger = logging.getLogger("render_page")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a page document to static HTML.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--payload", type=Path, help="Path to a JSON document payload.")
    source.add_argument("--project-id", help="Render the stored document of this project.")
    source.add_argument("--slug", help="Render the published project at this slug.")
    parser.add_argument("-o", "--output", type=Path, help="Output HTML path (defaults to stdout).")
    parser.add_argument(
        "--mode",
        choices=[RenderMode.PUBLIC.value, RenderMode.PREVIEW.value],
        default=RenderMode.PUBLIC.value,
        help="Public pages carry the branding footer; previews do not.",
    )
    parser.add_argument("--title", help="Page title (defaults to the project title).")
    parser.add_argument("--no-branding", action="store_true", help="Omit the 'Powered by' footer.")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    configure_logging("WARNING" if args.quiet else settings.log_level)

    title = args.title
    description = None
    if args.payload:
        document = loads(args.payload.read_text(encoding="utf-8"))
    else:
        store = open_project_store(settings)
        try:
            if args.slug:
                project = store.get_published_by_slug(args.slug)
            else:
                project = store.get_project(args.project_id)
        except ProjectNotFoundError as exc:
            logger.error("%s", exc)
            return 1
        document = project.document
        title = title or project.title
        description = project.description or None

    for warning in validate_document(document):
        logger.warning("[%s] %s", warning.block_id, warning.message)

    options = RenderOptions(
        mode=RenderMode(args.mode),
        page_title=title,
        description=description,
        site_name=settings.site_name,
        show_branding=not args.no_branding,
    )
    html = HtmlRenderer().render_page(document, options=options)

    if args.output:
        args.output.write_text(html, encoding="utf-8")
        logger.info("Wrote %d blocks to %s", len(document.blocks), args.output)
    else:
        sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
