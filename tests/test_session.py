from __future__ import annotations

from typing import Iterator, List

import pytest

from memento_editor.session import (
    ConsoleMenu,
    EditorSession,
    InvalidChoiceError,
    MenuChoice,
    parse_choice,
)


def scripted_reader(*lines: str):
    feed: Iterator[str] = iter(lines)
    prompts: List[str] = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return read, prompts


def test_redo_restores_state_before_undo() -> None:
    session = EditorSession()
    session.insert("x")
    session.insert("y")

    undone = session.undo()
    redone = session.redo()

    assert undone.applied is True
    assert redone.applied is True
    assert session.text == "x y "


def test_undo_and_redo_report_empty_history() -> None:
    session = EditorSession()

    undo = session.undo()
    redo = session.redo()

    assert (undo.applied, undo.message) == (False, "Nothing to undo!")
    assert (redo.applied, redo.message) == (False, "Nothing to redo!")
    assert session.text == ""


def test_insert_undo_insert_drops_redo() -> None:
    session = EditorSession()
    session.insert("first")
    session.undo()
    session.insert("second")

    assert session.redo().applied is False
    assert session.text == "second "


def test_edit_results_carry_operation_labels() -> None:
    session = EditorSession()

    result = session.delete_word("ghost")

    assert result.status == "delete_word"
    assert result.message == "Delete word 'ghost'"
    assert session.text == " "


@pytest.mark.parametrize("raw", ["", "abc", "0", "6", "-1"])
def test_parse_choice_rejects_unknown_input(raw: str) -> None:
    with pytest.raises(InvalidChoiceError):
        parse_choice(raw)


def test_parse_choice_accepts_padded_numbers() -> None:
    assert parse_choice(" 3 \n") is MenuChoice.UNDO


def test_console_menu_runs_full_script() -> None:
    read, prompts = scripted_reader(
        "1", "hello", "1", "world", "2", "hello", "3", "4", "4", "9", "5"
    )
    output: List[str] = []
    session = EditorSession()

    ConsoleMenu(session, read=read, write=output.append).run()

    assert session.text == "world "
    assert "Enter text: " in prompts
    assert "Enter word to delete: " in prompts
    assert output.count("Nothing to redo!") == 1
    assert "Invalid option!" in output
    assert output[-1] == "Exiting..."
    assert "\nCurrent Text: hello world " in output


def test_console_menu_reports_nothing_to_undo() -> None:
    read, _ = scripted_reader("3", "5")
    output: List[str] = []

    ConsoleMenu(EditorSession(), read=read, write=output.append).run()

    assert "Nothing to undo!" in output


def test_console_menu_exits_on_end_of_input() -> None:
    read, _ = scripted_reader("1", "only")
    output: List[str] = []
    session = EditorSession()

    ConsoleMenu(session, read=read, write=output.append).run()

    assert session.text == "only "
    assert output[-1] == "Exiting..."
