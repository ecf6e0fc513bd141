"""Table-of-contents construction for one folder entry."""

from __future__ import annotations

import posixpath
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..rules import RuleSet
from .eligibility import is_file_eligible, is_folder_eligible
from .types import BookEntry, FileEntry, FolderEntry

FOLDER_ICON = "\U0001F4C2"
FILE_ICON = "\U0001F4C4"


@dataclass(frozen=True)
class TocItem:
    """One table-of-contents line: glyph plus the heading it links to."""

    icon: str
    display_name: str

    def render(self) -> str:
        return f"{self.icon} [[#{self.display_name}]]"


def parent_path(path: str) -> str:
    """Rooted parent path (``"/A/n1.md"`` -> ``"/A"``, ``"/A"`` -> ``"/"``)."""
    return posixpath.dirname(path.rstrip("/")) or "/"


def is_toc_child(entry: BookEntry, path: str, depth: int, legacy: bool = False) -> bool:
    """Return whether ``entry`` is listed in the TOC of the node at ``path``.

    The legacy rule only requires depth + 1 and ``path`` appearing inside the
    entry path, which also matches siblings sharing a name prefix.
    """
    if entry.depth != depth + 1:
        return False
    if legacy:
        return path in entry.path
    return parent_path(entry.path) == path


def build_toc(
    path: str,
    depth: int,
    entries: Sequence[BookEntry],
    rules: RuleSet,
    read_content: Callable[[FileEntry], str],
) -> list[TocItem]:
    """List the eligible direct children of the node at ``path``, in walk order."""
    items: list[TocItem] = []
    for entry in entries:
        if not is_toc_child(entry, path, depth, legacy=rules.legacy_toc_scoping):
            continue
        if isinstance(entry, FolderEntry):
            if is_folder_eligible(entry, rules):
                items.append(TocItem(FOLDER_ICON, entry.display_name))
            continue
        if is_file_eligible(entry, rules, read_content(entry)):
            items.append(TocItem(FILE_ICON, entry.display_name))
    return items


def format_toc(items: Sequence[TocItem]) -> str:
    """Render TOC items one per line; an empty TOC renders as ``""``."""
    return "".join(item.render() + "\n" for item in items)


__all__ = [
    "FOLDER_ICON",
    "FILE_ICON",
    "TocItem",
    "parent_path",
    "is_toc_child",
    "build_toc",
    "format_toc",
]
