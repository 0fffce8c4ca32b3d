"""Two-stack undo/redo history of document snapshots."""

from __future__ import annotations

from typing import List, Optional

from memento_editor.runtime import telemetry

from .snapshot import Snapshot


class History:
    """LIFO undo and redo stacks.

    Saving a new state always drops the redo stack, so redo targets only
    survive a run of consecutive undos.
    """

    def __init__(self) -> None:
        self._undo_stack: List[Snapshot] = []
        self._redo_stack: List[Snapshot] = []

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def save_state(self, snapshot: Snapshot) -> None:
        self._undo_stack.append(snapshot)
        self._redo_stack.clear()

    def undo(self, current_state: Snapshot) -> Optional[Snapshot]:
        if not self.can_undo():
            telemetry.record_event("history.undo_empty", level="debug")
            return None
        self._redo_stack.append(current_state)
        previous = self._undo_stack.pop()
        self._record("history.undo")
        return previous

    def redo(self, current_state: Snapshot) -> Optional[Snapshot]:
        if not self.can_redo():
            telemetry.record_event("history.redo_empty", level="debug")
            return None
        self._undo_stack.append(current_state)
        following = self._redo_stack.pop()
        self._record("history.redo")
        return following

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()

    def _record(self, event: str) -> None:
        telemetry.record_event(
            event,
            level="debug",
            data={"undo_depth": self.undo_depth, "redo_depth": self.redo_depth},
        )
