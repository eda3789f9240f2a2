"""Editing session: the single owner of a project's in-progress document."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any

from site_blocks.config import DEFAULT_HISTORY_LIMIT
from site_blocks.document import (
    find_block,
    get_block,
    insert,
    remove,
    rename,
    reorder,
    set_visible,
    toggle_visible,
    update_content,
)
from site_blocks.models.blocks import Block, BlockType, create_block
from site_blocks.models.document import Document
from site_blocks.models.project import Project
from site_blocks.renderers.base import RenderMode
from site_blocks.store.base import ProjectStore

logger = logging.getLogger(__name__)

SAVE_OK_MESSAGE = "Project saved successfully!"
SAVE_FAILED_MESSAGE = "Failed to save project"


@dataclass(frozen=True, slots=True)
class SaveResult:
    ok: bool
    message: str
    project: Project | None = None


class EditorSession:
    """Document, selection, view mode and undo history for one project.

    Every mutator applies one pure document operation. Document errors from
    those operations propagate unchanged and leave the session untouched.
    """

    def __init__(
        self,
        store: ProjectStore,
        project_id: str,
        *,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        if history_limit < 1:
            raise ValueError("history_limit must be at least 1.")
        self._store = store
        self.project_id = project_id
        self.document = Document()
        self.selected_block_id: str | None = None
        self.view_mode = RenderMode.EDIT
        self.dirty = False
        self.loaded = False
        self._undo: deque[Document] = deque(maxlen=history_limit)
        self._redo: list[Document] = []

    # ----------------------------------------------------------------- Loading
    def load(self) -> Document:
        """Fetch the stored document, discarding local state and history."""
        self.document = self._store.load_document(self.project_id)
        self.selected_block_id = None
        self.dirty = False
        self.loaded = True
        self._undo.clear()
        self._redo.clear()
        logger.debug("Loaded project %s with %d blocks", self.project_id, len(self.document.blocks))
        return self.document

    # ------------------------------------------------------------------- State
    @property
    def selected_block(self) -> Block | None:
        if self.selected_block_id is None:
            return None
        return find_block(self.document, self.selected_block_id)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def select(self, block_id: str | None) -> None:
        if block_id is not None:
            get_block(self.document, block_id)
        self.selected_block_id = block_id

    def set_view_mode(self, mode: RenderMode | str) -> None:
        resolved = RenderMode(mode)
        if resolved is RenderMode.PUBLIC:
            raise ValueError("The editor switches between edit and preview only.")
        self.view_mode = resolved

    def toggle_preview(self) -> RenderMode:
        self.view_mode = RenderMode.PREVIEW if self.view_mode is RenderMode.EDIT else RenderMode.EDIT
        return self.view_mode

    # ---------------------------------------------------------------- Mutators
    def add_block(self, block_type: BlockType | str, at_index: int | None = None) -> Block:
        """Insert a fresh block with default content and select it."""
        block = create_block(block_type)
        self._apply(insert(self.document, block, at_index))
        self.selected_block_id = block.id
        return block

    def move(self, from_index: int, to_index: int | None) -> None:
        """Move one block; a ``None`` destination (dropped outside) is a no-op."""
        if to_index is None:
            return
        updated = reorder(self.document, from_index, to_index)
        if from_index != to_index:
            self._apply(updated)

    def edit_field(self, block_id: str, field: str, value: Any) -> None:
        self._apply(update_content(self.document, block_id, field, value))

    def rename(self, block_id: str, name: str) -> None:
        self._apply(rename(self.document, block_id, name))

    def set_visible(self, block_id: str, visible: bool) -> None:
        self._apply(set_visible(self.document, block_id, visible))

    def toggle_visible(self, block_id: str) -> None:
        self._apply(toggle_visible(self.document, block_id))

    def delete_block(self, block_id: str) -> None:
        updated = remove(self.document, block_id)
        if updated.blocks != self.document.blocks:
            self._apply(updated)
        if self.selected_block_id == block_id:
            self.selected_block_id = None

    def replace_document(self, document: Document) -> None:
        """Swap in a document produced elsewhere, e.g. by a property panel helper."""
        self._apply(document)

    # ----------------------------------------------------------------- History
    def undo(self) -> bool:
        if not self._undo:
            return False
        self._redo.append(self.document)
        self.document = self._undo.pop()
        self._after_history_step()
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        self._undo.append(self.document)
        self.document = self._redo.pop()
        self._after_history_step()
        return True

    # ------------------------------------------------------------------ Saving
    def save(self) -> SaveResult:
        """Persist the whole document; failures are reported, never retried."""
        try:
            project = self._store.save_document(self.project_id, self.document)
        except Exception as exc:
            logger.exception("Saving project %s failed", self.project_id)
            return SaveResult(ok=False, message=f"{SAVE_FAILED_MESSAGE}: {exc}")
        self.dirty = False
        return SaveResult(ok=True, message=SAVE_OK_MESSAGE, project=project)

    # ----------------------------------------------------------------- Helpers
    def _apply(self, document: Document) -> None:
        self._undo.append(self.document)
        self._redo.clear()
        self.document = document
        self.dirty = True

    def _after_history_step(self) -> None:
        self.dirty = True
        if self.selected_block_id is not None and find_block(self.document, self.selected_block_id) is None:
            self.selected_block_id = None


__all__ = ["EditorSession", "SAVE_FAILED_MESSAGE", "SAVE_OK_MESSAGE", "SaveResult"]
