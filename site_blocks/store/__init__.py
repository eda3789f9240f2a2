"""Project persistence."""

from .base import ProjectStore
from .factory import create_project_store
from .project_repository import (
    InvalidStatusError,
    ProjectNotFoundError,
    ProjectRepository,
    ProjectStoreError,
    slugify,
)

__all__ = [
    "InvalidStatusError",
    "ProjectNotFoundError",
    "ProjectRepository",
    "ProjectStore",
    "ProjectStoreError",
    "create_project_store",
    "slugify",
]
