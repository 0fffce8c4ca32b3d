"""Insert and delete-word operations over a Document and its History."""

from __future__ import annotations

from abc import ABC, abstractmethod

from memento_editor.editor import Document, History
from memento_editor.runtime import telemetry


class EditOperation(ABC):
    """One undoable document mutation.

    Operations keep no state of their own beyond their argument; everything
    needed for undo lives in the shared ``History``.
    """

    label: str = "edit"

    def __init__(self, document: Document, history: History) -> None:
        self.document = document
        self.history = history

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable summary of the edit."""

    @abstractmethod
    def apply(self) -> None:
        """Mutate the document."""

    def execute(self) -> None:
        with telemetry.span(
            name=f"edit::{self.label}",
            component=True,
            metadata={"description": self.description},
        ):
            self.history.save_state(self.document.save())
            self.apply()

    def undo(self) -> None:
        previous = self.history.undo(self.document.save())
        if previous is not None:
            self.document.restore(previous)


class InsertOperation(EditOperation):
    label = "insert_text"

    def __init__(self, document: Document, history: History, text: str) -> None:
        super().__init__(document, history)
        self.text = text

    @property
    def description(self) -> str:
        return f"Insert '{self.text}'"

    def apply(self) -> None:
        self.document.insert_text(self.text)


class DeleteWordOperation(EditOperation):
    label = "delete_word"

    def __init__(self, document: Document, history: History, word: str) -> None:
        super().__init__(document, history)
        self.word = word

    @property
    def description(self) -> str:
        return f"Delete word '{self.word}'"

    def apply(self) -> None:
        self.document.delete_word(self.word)
