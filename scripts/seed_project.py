"""Create a project from a JSON payload (or the default section layout) and print it."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from site_blocks.config import configure_logging, load_settings
from site_blocks.document import insert
from site_blocks.models.blocks import BlockType, create_block
from site_blocks.models.document import Document
from site_blocks.models.project import ProjectStatus
from site_blocks.serialization import loads
from site_blocks.startup import open_project_store

DEFAULT_LAYOUT = (BlockType.HERO, BlockType.ABOUT, BlockType.SERVICES, BlockType.CONTACT, BlockType.FOOTER)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed a project into the configured database.")
    parser.add_argument("title", help="Project title; the slug is derived from it.")
    parser.add_argument("--payload", type=Path, help="JSON document payload to store.")
    parser.add_argument("--description", default="", help="Project description.")
    parser.add_argument("--publish", action="store_true", help="Publish the project immediately.")
    args = parser.parse_args()

    settings = load_settings()
    configure_logging(settings.log_level)

    if args.payload:
        document = loads(args.payload.read_text(encoding="utf-8"))
    else:
        document = Document()
        for block_type in DEFAULT_LAYOUT:
            document = insert(document, create_block(block_type))

    store = open_project_store(settings)
    status = ProjectStatus.PUBLISHED if args.publish else ProjectStatus.DRAFT
    project = store.create_project(args.title, description=args.description, document=document, status=status)

    print(f"Stored project {project.id} at /{project.slug} ({project.status.value}) with {len(document.blocks)} blocks:\n")
    for index, block in enumerate(project.document.blocks):
        marker = "" if block.visible else " [hidden]"
        print(f"  {index}. {block.type} ({block.id}): {block.name}{marker}")


if __name__ == "__main__":
    main()
