"""Document, snapshot, and undo/redo history structures."""

from .document import SEPARATOR, Document
from .history import History
from .snapshot import Snapshot

__all__ = [
    "Document",
    "History",
    "SEPARATOR",
    "Snapshot",
]
