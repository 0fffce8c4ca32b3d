"""Immutable captures of document text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Text of a document at one point in time."""

    text: str

    @property
    def saved_text(self) -> str:
        return self.text
