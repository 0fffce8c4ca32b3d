"""Snapshot-based text editor with undo/redo history."""

__version__ = "0.1.0"
