"""Live editing sessions keyed by project id."""

from __future__ import annotations

import logging

from site_blocks.config import DEFAULT_HISTORY_LIMIT
from site_blocks.store.base import ProjectStore

from .session import EditorSession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """One session per open project, shared by every page that shows it."""

    def __init__(self, store: ProjectStore, *, history_limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        self._store = store
        self._history_limit = history_limit
        self._sessions: dict[str, EditorSession] = {}

    def __contains__(self, project_id: object) -> bool:
        return project_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, project_id: str) -> EditorSession | None:
        return self._sessions.get(project_id)

    def open(self, project_id: str) -> EditorSession:
        """Return the live session for ``project_id``, loading it on first use."""
        session = self._sessions.get(project_id)
        if session is None:
            session = EditorSession(self._store, project_id, history_limit=self._history_limit)
            session.load()
            self._sessions[project_id] = session
        return session

    def close(self, project_id: str) -> bool:
        """Drop a session without unsaved changes; dirty sessions stay open."""
        session = self._sessions.get(project_id)
        if session is None:
            return True
        if session.dirty:
            logger.debug("Keeping session %s open: unsaved changes", project_id)
            return False
        del self._sessions[project_id]
        return True

    def discard(self, project_id: str) -> None:
        """Forget a session unconditionally, e.g. after its project was deleted."""
        if self._sessions.pop(project_id, None) is not None:
            logger.info("Discarded editing session for %s", project_id)


__all__ = ["SessionRegistry"]
