"""Edit operations that pair a document mutation with history capture."""

from .edit import DeleteWordOperation, EditOperation, InsertOperation

__all__ = [
    "EditOperation",
    "InsertOperation",
    "DeleteWordOperation",
]
