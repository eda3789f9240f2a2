"""Factory helpers for constructing the project store."""

from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from .project_repository import ProjectRepository


def create_project_store(session_factory: sessionmaker[Session]) -> ProjectRepository:
    """Build the default SQLAlchemy-backed project store."""
    return ProjectRepository(session_factory)


__all__ = ["create_project_store"]
