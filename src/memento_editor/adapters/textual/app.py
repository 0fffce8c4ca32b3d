"""Executable Textual app that hosts an editor session."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use memento_editor.adapters.textual.app"
    ) from exc

from memento_editor.runtime import telemetry
from memento_editor.session import ConsoleMenu, EditorSession

from .controller import TextualEditorAdapter, TextualUIHooks

UI_CHOICES = ("textual", "console")


@dataclass
class UIState:
    document_text: str = ""
    status_text: str = ""


class EditorApp(App[None]):
    """Single-document editor: type into the prompt, Enter appends it."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#document-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+z", "undo", "Undo", priority=True),
        Binding("ctrl+y", "redo", "Redo", priority=True),
        Binding("ctrl+d", "delete_word", "Delete word", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, session: Optional[EditorSession] = None) -> None:
        super().__init__()
        self._state = UIState()
        self.session = session or EditorSession()
        self.adapter: TextualEditorAdapter | None = None
        self._document_widget: Static | None = None
        self._status_widget: Static | None = None
        self._prompt: Input | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="document-area"):
            self._document_widget = Static("", id="document-view")
            yield self._document_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        self._prompt = Input(placeholder="Text to insert, or a word to delete")
        yield self._prompt
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_text=self._update_text,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        if self._prompt:
            self._prompt.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.adapter:
            self.adapter.insert(event.value)
        event.input.value = ""

    def action_delete_word(self) -> None:
        if not self.adapter or not self._prompt:
            return
        self.adapter.delete_word(self._prompt.value.strip())
        self._prompt.value = ""

    def action_undo(self) -> None:
        if self.adapter:
            self.adapter.undo()

    def action_redo(self) -> None:
        if self.adapter:
            self.adapter.redo()

    def _update_text(self, text: str) -> None:
        self._state.document_text = text
        if self._document_widget:
            self._document_widget.update(text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.record_event("ui.log", level="debug", data={"line": line})


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the memento text editor.")
    parser.add_argument(
        "--console",
        action="store_const",
        const="console",
        dest="ui",
        default=os.environ.get("MEMENTO_EDITOR_UI", "textual"),
        help="Use the numbered console menu instead of the Textual UI",
    )
    parser.add_argument(
        "--log-preset",
        choices=sorted(telemetry.PRESETS),
        default=os.environ.get("MEMENTO_EDITOR_LOG_PRESET"),
        help="Log preset (default: file for Textual, environment for console)",
    )
    args = parser.parse_args(argv)
    if args.ui not in UI_CHOICES:
        parser.error(f"MEMENTO_EDITOR_UI must be one of {', '.join(UI_CHOICES)}")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    preset = args.log_preset or ("file" if args.ui == "textual" else None)
    telemetry.configure(preset=preset)
    session = EditorSession()
    if args.ui == "console":
        ConsoleMenu(session).run()
        return
    EditorApp(session).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
