from __future__ import annotations

import dataclasses

import pytest

from memento_editor.editor import Document, Snapshot


def test_insert_appends_text_and_separator() -> None:
    document = Document("draft ")

    document.insert_text("more words")

    assert document.get_text() == "draft more words "


def test_insert_empty_string_appends_lone_separator() -> None:
    document = Document()

    document.insert_text("")

    assert document.get_text() == " "


def test_delete_word_removes_last_occurrence() -> None:
    document = Document("a b a c ")

    document.delete_word("a")

    assert document.get_text() == "a b c "


def test_delete_missing_word_keeps_tokens() -> None:
    document = Document("  alpha beta")

    document.delete_word("gamma")

    assert document.get_text() == "alpha beta "


def test_delete_only_token_leaves_single_separator() -> None:
    document = Document("hello ")

    document.delete_word("hello")

    assert document.get_text() == " "


def test_delete_word_matches_whole_tokens_only() -> None:
    document = Document("hello hell ")

    document.delete_word("hel")

    assert document.get_text() == "hello hell "


def test_save_and_restore_round_trip() -> None:
    document = Document()
    document.insert_text("first")
    snapshot = document.save()

    document.set_text("overwritten")
    assert document.get_text() == "overwritten"

    document.restore(snapshot)
    assert document.get_text() == "first "
    assert snapshot.saved_text == "first "


def test_snapshot_is_immutable() -> None:
    snapshot = Snapshot("fixed")

    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.text = "changed"  # type: ignore[misc]


def test_delete_word_keeps_non_breaking_space_in_token() -> None:
    document = Document("a\u00a0 ")

    document.delete_word("a\u00a0")

    assert document.get_text() == " "


def test_delete_word_trims_trailing_control_characters() -> None:
    document = Document("a\x01")

    document.delete_word("a")

    assert document.get_text() == " "


def test_delete_word_trims_tabs_and_newlines() -> None:
    document = Document("\tone two\n")

    document.delete_word("two")

    assert document.get_text() == "one "
