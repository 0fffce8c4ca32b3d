"""Single owner of a Document and its History."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from memento_editor.commands import DeleteWordOperation, EditOperation, InsertOperation
from memento_editor.editor import Document, History, Snapshot
from memento_editor.runtime import telemetry

NOTHING_TO_UNDO = "Nothing to undo!"
NOTHING_TO_REDO = "Nothing to redo!"


@dataclass(slots=True)
class ActionResult:
    """Outcome of a session action, for hosts that render feedback."""

    applied: bool
    status: str = "ok"
    message: Optional[str] = None


class EditorSession:
    def __init__(
        self,
        *,
        document: Optional[Document] = None,
        history: Optional[History] = None,
    ) -> None:
        self.document = document or Document()
        self.history = history or History()

    @property
    def text(self) -> str:
        return self.document.get_text()

    def insert(self, text: str) -> ActionResult:
        return self._run(InsertOperation(self.document, self.history, text))

    def delete_word(self, word: str) -> ActionResult:
        return self._run(DeleteWordOperation(self.document, self.history, word))

    def undo(self) -> ActionResult:
        previous = self.history.undo(self.document.save())
        return self._restore(previous, status="undo", empty_message=NOTHING_TO_UNDO)

    def redo(self) -> ActionResult:
        following = self.history.redo(self.document.save())
        return self._restore(following, status="redo", empty_message=NOTHING_TO_REDO)

    def _run(self, operation: EditOperation) -> ActionResult:
        operation.execute()
        telemetry.record_event(
            "session.edit",
            level="debug",
            data={"operation": operation.label, "text": self.text},
        )
        return ActionResult(
            applied=True, status=operation.label, message=operation.description
        )

    def _restore(
        self, snapshot: Optional[Snapshot], *, status: str, empty_message: str
    ) -> ActionResult:
        if snapshot is None:
            return ActionResult(
                applied=False, status=f"{status}_empty", message=empty_message
            )
        self.document.restore(snapshot)
        telemetry.record_event(
            f"session.{status}", level="debug", data={"text": self.text}
        )
        return ActionResult(applied=True, status=status)
