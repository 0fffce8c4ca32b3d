"""Adapter that wires EditorSession actions into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from memento_editor.session import ActionResult, EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_text: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges UI actions to an EditorSession and pushes results back."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._refresh_text()

    def insert(self, text: str) -> ActionResult:
        return self._dispatch("insert", lambda: self.session.insert(text), arg=text)

    def delete_word(self, word: str) -> ActionResult:
        return self._dispatch(
            "delete_word", lambda: self.session.delete_word(word), arg=word
        )

    def undo(self) -> ActionResult:
        return self._dispatch("undo", self.session.undo)

    def redo(self) -> ActionResult:
        return self._dispatch("redo", self.session.redo)

    def _dispatch(
        self, action: str, call: Callable[[], ActionResult], *, arg: str | None = None
    ) -> ActionResult:
        self._log_state("action ->", action=action, arg=arg)
        result = call()
        self.hooks.update_status(result.message or result.status)
        self._refresh_text()
        self._log_state("result <-", applied=result.applied, status=result.status)
        return result

    def _refresh_text(self) -> None:
        self.hooks.update_text(self.session.text)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        history = self.session.history
        return {
            "text": self.session.text,
            "undo_depth": history.undo_depth,
            "redo_depth": history.redo_depth,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
