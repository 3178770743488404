from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from netsuite_cli.models import FolderEntry
from netsuite_cli.selector import (
    PAGE_SIZE,
    ActionKind,
    Selection,
    SelectionKind,
    page_count,
    resolve_input,
    select_folder,
)


def _entries(count: int) -> List[FolderEntry]:
    return [
        FolderEntry(relative_path=f"folder{i:02d}", display_label=f"folder{i:02d}", absolute_path=Path(f"/tmp/folder{i:02d}"))
        for i in range(count)
    ]


@pytest.mark.parametrize("count, pages", [(0, 0), (1, 1), (20, 1), (21, 2), (40, 2), (41, 3)])
def test_page_count(count: int, pages: int) -> None:
    assert page_count(count) == pages


def test_resolve_root_and_entries() -> None:
    assert resolve_input("0", 0, 5).selection == Selection.root()
    assert resolve_input(" 3 \n", 0, 5).selection == Selection.entry(2)
    assert resolve_input("5", 0, 5).selection == Selection.entry(4)


@pytest.mark.parametrize("token", ["6", "-1", "abc", "", "1.5", "1_0"])
def test_resolve_invalid(token: str) -> None:
    action = resolve_input(token, 0, 5)
    assert action.kind is ActionKind.INVALID
    assert action.message


def test_resolve_out_of_range_message() -> None:
    assert "between 0 and 5" in resolve_input("9", 0, 5).message


def test_navigation_tokens_on_single_page_are_invalid() -> None:
    assert resolve_input("n", 0, 5).kind is ActionKind.INVALID
    assert resolve_input("p", 0, 5).kind is ActionKind.INVALID


def test_navigation_tokens_across_pages() -> None:
    count = PAGE_SIZE * 2 + 1
    assert resolve_input("N", 0, count).kind is ActionKind.NEXT_PAGE
    assert resolve_input("n", 2, count).kind is ActionKind.INVALID
    assert resolve_input("p", 0, count).kind is ActionKind.INVALID
    assert resolve_input(" P ", 1, count).kind is ActionKind.PREVIOUS_PAGE


def test_select_entry_on_second_page(session_factory) -> None:
    session = session_factory(["n", "22"])
    selection = select_folder(_entries(25), session.terminal)

    assert selection == Selection.entry(21)
    assert "Page 1 of 2 (n: next page)" in session.text
    assert "Page 2 of 2 (p: previous page)" in session.text
    assert "  22. folder21" in session.text
    assert not session.pauses


def test_select_root_without_pagination_hints(session_factory) -> None:
    session = session_factory(["0"])
    assert select_folder(_entries(3), session.terminal).kind is SelectionKind.ROOT
    assert "0. SuiteScripts (root)" in session.text
    assert "Page" not in session.text
    assert "'n' for next page" not in session.text


def test_invalid_input_reprompts_same_page(session_factory) -> None:
    session = session_factory(["n", "p", "x", "99", "n", "1"])
    selection = select_folder(_entries(30), session.terminal)

    # "n" moves to page 2, "p" back to page 1, then two bad answers keep page 1.
    assert selection == Selection.entry(0)
    assert session.pauses == [1.0, 1.0]
    assert "Invalid selection. Please enter a number or 'n'/'p' for navigation." in session.text
    assert "Invalid selection. Please choose between 0 and 30." in session.text


def test_empty_catalog_asks_for_root(session_factory) -> None:
    session = session_factory(["Yes"])
    assert select_folder([], session.terminal) == Selection.root()
    assert "Place script in SuiteScripts root?" in session.text
    assert "Available folders" not in session.text


@pytest.mark.parametrize("answer", ["n", "", "maybe"])
def test_empty_catalog_decline_cancels(session_factory, answer: str) -> None:
    session = session_factory([answer])
    assert select_folder([], session.terminal) == Selection.cancelled()


def test_closed_input_is_an_io_error(session_factory) -> None:
    session = session_factory([])
    with pytest.raises(OSError):
        select_folder(_entries(2), session.terminal)
