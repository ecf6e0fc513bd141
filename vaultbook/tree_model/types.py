"""Walk record datatypes: one tagged entry per visited file or folder."""

from __future__ import annotations

from dataclasses import dataclass

from ..vault.types import NoteFile, NoteFolder


@dataclass(frozen=True)
class FileEntry:
    """One visited file.

    ``path`` is rooted (``"/A/n1.md"``); ``depth`` counts from the collection
    root, whose direct children are depth 1.
    """

    path: str
    name: str
    display_name: str
    depth: int
    extension: str = ""
    created_ns: int | None = None
    modified_ns: int | None = None
    note: NoteFile | None = None


@dataclass(frozen=True)
class FolderEntry:
    """One visited folder; ``child_count`` is the raw, pre-filter count."""

    path: str
    name: str
    display_name: str
    depth: int
    child_count: int = 0
    note: NoteFolder | None = None


BookEntry = FolderEntry | FileEntry


__all__ = [
    "FileEntry",
    "FolderEntry",
    "BookEntry",
]
