"""Session ownership of the document/history pair and the console menu."""

from .console import ConsoleMenu, InvalidChoiceError, MenuChoice, parse_choice
from .editor_session import ActionResult, EditorSession

__all__ = [
    "ActionResult",
    "ConsoleMenu",
    "EditorSession",
    "InvalidChoiceError",
    "MenuChoice",
    "parse_choice",
]
