"""Paginated folder picker used by ``add``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from loguru import logger
from rich.markup import escape

from .console import Terminal
from .models import FolderEntry

PAGE_SIZE = 20
ROOT_LABEL = "SuiteScripts (root)"

_INTEGER = re.compile(r"[+-]?[0-9]+")


class UserCancelled(Exception):
    """Raised when the user declines to continue at a prompt."""


class SelectionKind(str, Enum):
    ROOT = "root"
    ENTRY = "entry"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class Selection:
    """Terminal outcome of the folder picker."""

    kind: SelectionKind
    index: Optional[int] = None

    @classmethod
    def root(cls) -> "Selection":
        return cls(SelectionKind.ROOT)

    @classmethod
    def entry(cls, index: int) -> "Selection":
        return cls(SelectionKind.ENTRY, index)

    @classmethod
    def cancelled(cls) -> "Selection":
        return cls(SelectionKind.CANCELLED)


class ActionKind(str, Enum):
    NEXT_PAGE = "next"
    PREVIOUS_PAGE = "previous"
    SELECT = "select"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class MenuAction:
    """Result of interpreting one line of menu input."""

    kind: ActionKind
    selection: Optional[Selection] = None
    message: str = ""


def page_count(entry_count: int) -> int:
    """Number of pages needed to show ``entry_count`` folders."""

    return (entry_count + PAGE_SIZE - 1) // PAGE_SIZE


def page_bounds(page: int, entry_count: int) -> tuple[int, int]:
    start = page * PAGE_SIZE
    return start, min(start + PAGE_SIZE, entry_count)


def resolve_input(token: str, page: int, entry_count: int) -> MenuAction:
    """Map a line of input on ``page`` to the next menu action."""

    token = token.strip().lower()
    pages = page_count(entry_count)
    paginated = pages > 1

    if token == "n" and paginated:
        if page < pages - 1:
            return MenuAction(ActionKind.NEXT_PAGE)
        return MenuAction(ActionKind.INVALID, message="Already on the last page.")
    if token == "p" and paginated:
        if page > 0:
            return MenuAction(ActionKind.PREVIOUS_PAGE)
        return MenuAction(ActionKind.INVALID, message="Already on the first page.")

    if not _INTEGER.fullmatch(token):
        hint = " or 'n'/'p' for navigation" if paginated else ""
        return MenuAction(ActionKind.INVALID, message=f"Invalid selection. Please enter a number{hint}.")

    choice = int(token)
    if choice == 0:
        return MenuAction(ActionKind.SELECT, selection=Selection.root())
    if 1 <= choice <= entry_count:
        return MenuAction(ActionKind.SELECT, selection=Selection.entry(choice - 1))
    return MenuAction(
        ActionKind.INVALID,
        message=f"Invalid selection. Please choose between 0 and {entry_count}.",
    )


def _render_page(entries: Sequence[FolderEntry], page: int, terminal: Terminal) -> None:
    pages = page_count(len(entries))
    start, end = page_bounds(page, len(entries))

    terminal.menu()
    terminal.menu("Available folders under SuiteScripts:")
    terminal.menu(f"  0. {ROOT_LABEL}")
    terminal.menu("-" * 60)
    for index in range(start, end):
        terminal.menu(f"  {index + 1}. {escape(entries[index].display_label)}")

    if pages > 1:
        hints = []
        if page > 0:
            hints.append("p: previous page")
        if page < pages - 1:
            hints.append("n: next page")
        terminal.menu()
        terminal.menu(f"Page {page + 1} of {pages} ({', '.join(hints)})")


def _prompt(entry_count: int) -> str:
    prompt = "Select folder (0 for root, number to select"
    if page_count(entry_count) > 1:
        prompt += ", 'n' for next page, 'p' for previous page"
    return prompt + "): "


def select_folder(entries: Sequence[FolderEntry], terminal: Terminal) -> Selection:
    """Ask the user where a new script should be placed.

    With no folders available the user is only asked whether the SuiteScripts
    root is acceptable; declining yields a cancelled selection.
    """

    if not entries:
        terminal.menu()
        if terminal.confirm("No folders found under SuiteScripts. Place script in SuiteScripts root?"):
            return Selection.root()
        return Selection.cancelled()

    page = 0
    while True:
        _render_page(entries, page, terminal)
        action = resolve_input(terminal.read_line(_prompt(len(entries))), page, len(entries))
        if action.kind is ActionKind.NEXT_PAGE:
            page += 1
        elif action.kind is ActionKind.PREVIOUS_PAGE:
            page -= 1
        elif action.kind is ActionKind.SELECT and action.selection is not None:
            logger.debug("Folder selection: {}", action.selection)
            return action.selection
        else:
            terminal.menu(f"[red]{escape(action.message)}[/red]")
            terminal.pause(1.0)


__all__ = [
    "PAGE_SIZE",
    "ActionKind",
    "MenuAction",
    "Selection",
    "SelectionKind",
    "UserCancelled",
    "page_count",
    "resolve_input",
    "select_folder",
]
