"""Page block models."""

from .blocks import Block, BlockType, SectionContent, content_model_for, create_block, get_default_content
from .document import Document
from .project import Project, ProjectStatus

__all__ = [
    "Block",
    "BlockType",
    "Document",
    "Project",
    "ProjectStatus",
    "SectionContent",
    "content_model_for",
    "create_block",
    "get_default_content",
]
