"""Numbered console menu driving an EditorSession."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from .editor_session import EditorSession

MENU_LINES = (
    "1. Insert Text",
    "2. Delete Word",
    "3. Undo",
    "4. Redo",
    "5. Exit",
)


class MenuChoice(IntEnum):
    INSERT = 1
    DELETE_WORD = 2
    UNDO = 3
    REDO = 4
    EXIT = 5


class InvalidChoiceError(ValueError):
    """Raised when menu input is not one of the listed option numbers."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid menu option {raw!r}")
        self.raw = raw


def parse_choice(raw: str) -> MenuChoice:
    try:
        return MenuChoice(int(raw.strip()))
    except ValueError as exc:
        raise InvalidChoiceError(raw) from exc


class ConsoleMenu:
    """Read-eval-print loop over ``read``/``write`` callables.

    ``read`` receives the prompt and returns one line, like ``input``.
    End of input ends the loop the same way the exit option does.
    """

    def __init__(
        self,
        session: EditorSession,
        *,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.session = session
        self._read = read
        self._write = write

    def run(self) -> None:
        while True:
            self._show_menu()
            try:
                if not self.step(self._read("Choose option: ")):
                    return
            except EOFError:
                self._write("Exiting...")
                return

    def step(self, raw_choice: str) -> bool:
        """Handle one menu selection; return ``False`` once the user exits."""

        try:
            choice = parse_choice(raw_choice)
        except InvalidChoiceError:
            self._write("Invalid option!")
            return True

        if choice is MenuChoice.INSERT:
            self.session.insert(self._read("Enter text: "))
        elif choice is MenuChoice.DELETE_WORD:
            self.session.delete_word(self._read("Enter word to delete: "))
        elif choice is MenuChoice.UNDO or choice is MenuChoice.REDO:
            action = self.session.undo if choice is MenuChoice.UNDO else self.session.redo
            result = action()
            if not result.applied and result.message:
                self._write(result.message)
        else:
            self._write("Exiting...")
            return False
        return True

    def _show_menu(self) -> None:
        self._write(f"\nCurrent Text: {self.session.text}")
        for line in MENU_LINES:
            self._write(line)
