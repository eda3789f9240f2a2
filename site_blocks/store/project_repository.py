"""SQLAlchemy-backed repository for site projects."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session, sessionmaker

from site_blocks.db.schema import DbProject
from site_blocks.models.document import Document
from site_blocks.models.project import Project, ProjectStatus
from site_blocks.serialization import document_from_payload, document_to_payload

logger = logging.getLogger(__name__)

SLUG_MAX_LENGTH = 50
TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000

SORT_COLUMNS = {
    "last_edited_time": DbProject.last_edited_time,
    "created_time": DbProject.created_time,
    "title": DbProject.title,
    "status": DbProject.status,
}
DEFAULT_SORT = "last_edited_time"


class ProjectStoreError(RuntimeError):
    """Base class for project store errors."""


class ProjectNotFoundError(ProjectStoreError):
    """Raised when a project cannot be found for a requested operation."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Project {key!r} not found.")
        self.key = key


class InvalidStatusError(ProjectStoreError):
    """Raised for a status outside draft / published / archived."""

    def __init__(self, status: object) -> None:
        allowed = ", ".join(item.value for item in ProjectStatus)
        super().__init__(f"Invalid project status {status!r}; expected one of: {allowed}.")
        self.status = status


def slugify(title: str) -> str:
    """Lowercase ``title``, keep ``[a-z0-9 -]``, hyphenate whitespace, cap the length."""
    slug = re.sub(r"[^a-z0-9\s-]", "", title.lower())
    slug = re.sub(r"\s+", "-", slug)
    return slug[:SLUG_MAX_LENGTH]


class ProjectRepository:
    """Repository that persists projects and their page documents."""

    def __init__(self, session_factory: sessionmaker[Session], *, clock: Callable[[], datetime] | None = None):
        self._session_factory = session_factory
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    # ------------------------------------------------------------------ Queries
    def get_project(self, project_id: str) -> Project:
        with self._session_factory() as session:
            return self._to_model(self._require(session, project_id))

    def list_projects(
        self,
        *,
        status: ProjectStatus | str | None = None,
        search: str | None = None,
        sort_by: str = DEFAULT_SORT,
        sort_order: str = "desc",
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Project]:
        """Return projects, most recently edited first by default.

        ``search`` matches title or description case-insensitively. Unknown
        ``sort_by`` or ``sort_order`` values fall back to the defaults.
        """
        column = SORT_COLUMNS.get(sort_by, SORT_COLUMNS[DEFAULT_SORT])
        ordering = column.asc() if sort_order == "asc" else column.desc()
        query = self._filtered(select(DbProject), status, search).order_by(ordering, DbProject.title, DbProject.id)
        if offset:
            query = query.offset(max(offset, 0))
        if limit is not None:
            query = query.limit(max(limit, 0))
        with self._session_factory() as session:
            rows = session.scalars(query).all()
        return [self._to_model(row) for row in rows]

    def count_projects(self, *, status: ProjectStatus | str | None = None, search: str | None = None) -> int:
        """Total matching ``list_projects`` filters, ignoring paging."""
        query = self._filtered(select(func.count()).select_from(DbProject), status, search)
        with self._session_factory() as session:
            return int(session.scalar(query) or 0)

    def get_published_by_slug(self, slug: str) -> Project:
        """Return the published project at ``slug``; drafts and archives are not public."""
        query = select(DbProject).where(
            DbProject.slug == slug,
            DbProject.status == ProjectStatus.PUBLISHED.value,
        )
        with self._session_factory() as session:
            row = session.scalars(query).one_or_none()
            if row is None:
                raise ProjectNotFoundError(slug)
            return self._to_model(row)

    def load_document(self, project_id: str) -> Document:
        return self.get_project(project_id).document

    # ---------------------------------------------------------------- Mutations
    def create_project(
        self,
        title: str,
        *,
        description: str = "",
        document: Document | None = None,
        status: ProjectStatus | str = ProjectStatus.DRAFT,
    ) -> Project:
        title = _validate_title(title)
        description = _validate_description(description)
        resolved_status = _coerce_status(status)
        now = self._clock()
        with self._session_factory() as session:
            row = DbProject(
                id=str(uuid4()),
                title=title,
                description=description,
                slug=self._unique_slug(session, title),
                status=resolved_status.value,
                content=document_to_payload(document or Document()),
                published_at=now if resolved_status is ProjectStatus.PUBLISHED else None,
                created_time=now,
                last_edited_time=now,
            )
            session.add(row)
            session.commit()
            logger.info("Created project %s (%s)", row.id, row.slug)
            return self._to_model(row)

    def update_project(
        self,
        project_id: str,
        *,
        title: str | None = None,
        description: str | None = None,
    ) -> Project:
        """Update project details; the slug stays fixed once assigned."""
        with self._session_factory() as session:
            row = self._require(session, project_id)
            if title is not None:
                row.title = _validate_title(title)
            if description is not None:
                row.description = _validate_description(description)
            row.last_edited_time = self._clock()
            session.commit()
            return self._to_model(row)

    def save_document(self, project_id: str, document: Document) -> Project:
        """Replace the stored document wholesale; the last write wins."""
        with self._session_factory() as session:
            row = self._require(session, project_id)
            row.content = document_to_payload(document, stamp=True)
            row.last_edited_time = self._clock()
            session.commit()
            logger.info("Saved project %s with %d blocks", project_id, len(document.blocks))
            return self._to_model(row)

    def set_status(self, project_id: str, status: ProjectStatus | str) -> Project:
        resolved = _coerce_status(status)
        with self._session_factory() as session:
            row = self._require(session, project_id)
            row.status = resolved.value
            now = self._clock()
            if resolved is ProjectStatus.PUBLISHED:
                row.published_at = now
            row.last_edited_time = now
            session.commit()
            logger.info("Project %s is now %s", project_id, resolved.value)
            return self._to_model(row)

    def clone_project(self, project_id: str) -> Project:
        """Copy a project as a new draft titled ``"<title> - Copy"`` (numbered when taken)."""
        with self._session_factory() as session:
            source = self._require(session, project_id)
            base_title = f"{source.title} - Copy"
            title = base_title
            counter = 1
            while self._title_taken(session, title):
                title = f"{base_title} {counter}"
                counter += 1

            now = self._clock()
            row = DbProject(
                id=str(uuid4()),
                title=title,
                description=source.description,
                slug=self._unique_slug(session, title),
                status=ProjectStatus.DRAFT.value,
                content=dict(source.content or {}),
                published_at=None,
                created_time=now,
                last_edited_time=now,
            )
            session.add(row)
            session.commit()
            logger.info("Cloned project %s into %s", project_id, row.id)
            return self._to_model(row)

    def delete_project(self, project_id: str) -> None:
        with self._session_factory() as session:
            row = self._require(session, project_id)
            session.delete(row)
            session.commit()
            logger.info("Deleted project %s", project_id)

    # ----------------------------------------------------------------- Helpers
    def _filtered(self, query, status: ProjectStatus | str | None, search: str | None):
        if status is not None:
            query = query.where(DbProject.status == _coerce_status(status).value)
        if search and search.strip():
            pattern = f"%{search.strip()}%"
            query = query.where(or_(DbProject.title.ilike(pattern), DbProject.description.ilike(pattern)))
        return query

    def _require(self, session: Session, project_id: str) -> DbProject:
        row = session.get(DbProject, str(project_id))
        if row is None:
            raise ProjectNotFoundError(str(project_id))
        return row

    def _unique_slug(self, session: Session, title: str) -> str:
        base = slugify(title) or "project"
        slug = base
        counter = 1
        while session.scalars(select(DbProject.id).where(DbProject.slug == slug)).first() is not None:
            slug = f"{base}-{counter}"
            counter += 1
        return slug

    def _title_taken(self, session: Session, title: str) -> bool:
        return session.scalars(select(DbProject.id).where(DbProject.title == title)).first() is not None

    def _to_model(self, row: DbProject) -> Project:
        return Project(
            id=row.id,
            title=row.title,
            slug=row.slug,
            description=row.description or "",
            status=_coerce_status(row.status),
            document=document_from_payload(row.content),
            published_at=row.published_at,
            created_time=row.created_time,
            last_edited_time=row.last_edited_time,
        )


def _coerce_status(status: ProjectStatus | str) -> ProjectStatus:
    if isinstance(status, ProjectStatus):
        return status
    try:
        return ProjectStatus(status)
    except ValueError as exc:
        raise InvalidStatusError(status) from exc


def _validate_title(title: str) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValueError("Project title must not be empty.")
    if len(cleaned) > TITLE_MAX_LENGTH:
        raise ValueError(f"Project title must be at most {TITLE_MAX_LENGTH} characters.")
    return cleaned


def _validate_description(description: str | None) -> str:
    description = description or ""
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(f"Project description must be at most {DESCRIPTION_MAX_LENGTH} characters.")
    return description


__all__ = [
    "InvalidStatusError",
    "ProjectNotFoundError",
    "ProjectRepository",
    "ProjectStoreError",
    "slugify",
]
