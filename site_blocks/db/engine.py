"""Database engine helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

DEFAULT_SQLITE_URL = "sqlite+pysqlite:///:memory:"


def resolve_url(connection_string: str | None = None, *, sqlite_path: str | Path | None = None) -> str:
    """Return the SQLAlchemy URL for a connection string or SQLite file path.

    Falls back to an in-memory SQLite database when neither is given.
    """
    if connection_string and sqlite_path is not None:
        raise ValueError("Provide either 'connection_string' or 'sqlite_path', not both.")
    if connection_string:
        return connection_string
    if sqlite_path is not None:
        db_path = Path(sqlite_path).expanduser().resolve()
        return f"sqlite+pysqlite:///{db_path.as_posix()}"
    return DEFAULT_SQLITE_URL


def create_engine(
    connection_string: str | None = None,
    *,
    sqlite_path: str | Path | None = None,
    echo: bool = False,
    connect_args: Mapping[str, Any] | None = None,
) -> Engine:
    """Create the engine that backs the project store.

    Parameters
    ----------
    connection_string:
        Full SQLAlchemy URL, e.g. a Postgres DSN from ``DATABASE_URL``.
    sqlite_path:
        Filesystem path to a SQLite database file. Expanded to an absolute path.
    echo:
        Enable SQLAlchemy engine echo logging.
    connect_args:
        Optional mapping passed through to ``sqlalchemy.create_engine``.

    Notes
    -----
    In-memory SQLite gets a static pool so every session sees the same
    database; otherwise each new connection would start empty.
    """
    url = resolve_url(connection_string, sqlite_path=sqlite_path)
    options: dict[str, Any] = {"echo": echo, "connect_args": dict(connect_args or {})}
    if url == DEFAULT_SQLITE_URL:
        from sqlalchemy.pool import StaticPool

        options["poolclass"] = StaticPool
        options["connect_args"].setdefault("check_same_thread", False)
    return sa_create_engine(url, **options)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a configured session factory bound to the given engine."""
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


__all__ = ["DEFAULT_SQLITE_URL", "create_engine", "create_session_factory", "resolve_url"]
