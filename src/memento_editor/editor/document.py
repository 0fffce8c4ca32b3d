"""Mutable text storage for the editor session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .snapshot import Snapshot

SEPARATOR = " "
# Trimmed from both ends before tokenizing: control characters and space.
TRIM_CHARS = "".join(map(chr, range(0x21)))


@dataclass(slots=True)
class Document:
    """Flat whitespace-delimited text with append and delete-word edits.

    Every edit leaves ``text`` ending in exactly one separator. Deleting the
    only remaining token therefore yields ``" "`` rather than ``""``.
    """

    text: str = ""

    def insert_text(self, new_text: str) -> None:
        self.text += new_text + SEPARATOR

    def delete_word(self, word: str) -> None:
        """Remove the last token equal to ``word``, then renormalize."""

        tokens: List[str] = self.text.strip(TRIM_CHARS).split(SEPARATOR)
        for index in range(len(tokens) - 1, -1, -1):
            if tokens[index] == word:
                del tokens[index]
                break
        self.text = SEPARATOR.join(tokens) + SEPARATOR

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text

    def save(self) -> Snapshot:
        return Snapshot(self.text)

    def restore(self, snapshot: Snapshot) -> None:
        self.text = snapshot.text
