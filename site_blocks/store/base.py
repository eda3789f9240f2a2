"""Storage seam used by the editor session."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from site_blocks.models.document import Document
from site_blocks.models.project import Project


@runtime_checkable
class ProjectStore(Protocol):
    """Load and save whole page documents by project id."""

    def load_document(self, project_id: str) -> Document:
        ...

    def save_document(self, project_id: str, document: Document) -> Project:
        ...


__all__ = ["ProjectStore"]
