"""Database helpers."""

from .engine import create_engine, create_session_factory
from .schema import Base, DbProject, create_all

__all__ = ["Base", "DbProject", "create_all", "create_engine", "create_session_factory"]
