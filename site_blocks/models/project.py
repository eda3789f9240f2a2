"""Pydantic model for stored site projects."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .document import Document


class ProjectStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Project(BaseModel):
    """A site project: metadata plus the page document it publishes.

    ``slug`` is unique across projects and addresses the public page.
    """

    id: str
    title: str
    slug: str
    description: str = ""
    status: ProjectStatus = ProjectStatus.DRAFT
    document: Document = Field(default_factory=Document)
    published_at: datetime | None = None
    created_time: datetime | None = None
    last_edited_time: datetime | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_published(self) -> bool:
        return self.status is ProjectStatus.PUBLISHED


__all__ = ["Project", "ProjectStatus"]
