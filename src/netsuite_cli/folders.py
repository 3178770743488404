"""Destination folder discovery below a SuiteCloud project."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence

from loguru import logger

from .models import FolderEntry

SUITESCRIPTS_CANDIDATES: Sequence[str] = (
    "src/FileCabinet/SuiteScripts",
    "src/SuiteScripts",
    "SuiteScripts",
)
OBJECTS_CANDIDATES: Sequence[str] = ("src/Objects", "Objects")


def _first_existing(base: Path, candidates: Sequence[str]) -> Path | None:
    for candidate in candidates:
        path = base / candidate
        if path.is_dir():
            return path
    return None


def find_suitescripts_dir(base: Path | None = None) -> Path:
    """Locate the SuiteScripts root, creating it when none exists."""

    base = base or Path.cwd()
    found = _first_existing(base, SUITESCRIPTS_CANDIDATES)
    if found is not None:
        return found

    if (base / "src" / "FileCabinet").exists():
        target = base / "src" / "FileCabinet" / "SuiteScripts"
    elif (base / "src").exists():
        target = base / "src" / "SuiteScripts"
    else:
        target = base / "SuiteScripts"
    logger.debug("Creating SuiteScripts directory {}", target)
    target.mkdir(parents=True, exist_ok=True)
    return target


def find_objects_dir(base: Path | None = None) -> Path:
    """Locate the SDF Objects root, creating it when none exists."""

    base = base or Path.cwd()
    found = _first_existing(base, OBJECTS_CANDIDATES)
    if found is not None:
        return found

    target = base / "src" / "Objects" if (base / "src").exists() else base / "Objects"
    logger.debug("Creating Objects directory {}", target)
    target.mkdir(parents=True, exist_ok=True)
    return target


def _folder_label(name: str, relative_path: str) -> str:
    depth = relative_path.count("/")
    label = "  " * depth + name
    if depth > 0:
        label += f" ({relative_path})"
    return label


def enumerate_folders(root: Path) -> List[FolderEntry]:
    """List every directory below ``root`` in pre-order.

    Parents come before their children and siblings are sorted by name.
    Directories that cannot be read are treated as empty.
    """

    folders: List[FolderEntry] = []
    _collect(root, "", folders)
    return folders


def _collect(directory: Path, relative: str, folders: List[FolderEntry]) -> None:
    try:
        with os.scandir(directory) as entries:
            children = sorted(
                (entry for entry in entries if entry.is_dir(follow_symlinks=False)),
                key=lambda entry: entry.name,
            )
    except OSError:
        return

    for child in children:
        child_relative = f"{relative}/{child.name}" if relative else child.name
        child_path = directory / child.name
        folders.append(
            FolderEntry(
                relative_path=child_relative,
                display_label=_folder_label(child.name, child_relative),
                absolute_path=child_path.resolve(),
            )
        )
        _collect(child_path, child_relative, folders)


__all__ = [
    "OBJECTS_CANDIDATES",
    "SUITESCRIPTS_CANDIDATES",
    "enumerate_folders",
    "find_objects_dir",
    "find_suitescripts_dir",
]
