"""Editor session state."""

from .registry import SessionRegistry
from .session import EditorSession, SaveResult

__all__ = ["EditorSession", "SaveResult", "SessionRegistry"]
