"""Per-node inclusion checks driven by a :class:`RuleSet`."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..rules import RuleSet, clean_patterns
from .types import FileEntry, FolderEntry

BOOK_IGNORE_MARKER = "<!--book-ignore-->"

_WHITESPACE_RE = re.compile(r"\s+")


def is_book(content: str) -> bool:
    """Return whether ``content`` carries the generated-book marker."""
    return BOOK_IGNORE_MARKER in content


def line_includes_tag(line: str, tags: Iterable[str]) -> bool:
    """Return whether ``line`` mentions any of ``tags``.

    Matches ``#tag`` anywhere in the line, or the bare tag text after a
    ``tag:``/``tags:`` metadata key. Comparison is case-insensitive.
    """
    lowered = line.strip().lower()
    compact = _WHITESPACE_RE.sub("", lowered)
    is_metadata = compact.startswith(("tag:", "tags:"))
    remainder = lowered.split(":", 1)[1] if is_metadata else ""
    for tag in clean_patterns(tags):
        needle = tag.lower()
        if "#" + needle in lowered:
            return True
        if is_metadata and needle in remainder:
            return True
    return False


def is_file_eligible(file: FileEntry, rules: RuleSet, content: str) -> bool:
    """Return ``False`` when any exclusion rule applies to ``file``."""
    if is_book(content):
        return False

    tags = clean_patterns(rules.tags_to_ignore)
    if tags and any(line_includes_tag(line, tags) for line in content.split("\n")):
        return False

    extension = file.extension.lower()
    if any(pattern.lower() in extension for pattern in clean_patterns(rules.extensions_to_ignore)):
        return False

    name = file.name.strip()
    if any(name == pattern for pattern in clean_patterns(rules.files_to_ignore)):
        return False
    return True


def is_folder_eligible(folder: FolderEntry, rules: RuleSet, child_count: int | None = None) -> bool:
    """Return ``False`` for ignored names and, unless allowed, empty folders.

    Emptiness uses the raw child count, before any file filtering.
    """
    name = folder.name.strip()
    if any(name == pattern for pattern in clean_patterns(rules.folders_to_ignore)):
        return False
    count = folder.child_count if child_count is None else child_count
    if not rules.include_empty_folders and count == 0:
        return False
    return True


__all__ = [
    "BOOK_IGNORE_MARKER",
    "is_book",
    "line_includes_tag",
    "is_file_eligible",
    "is_folder_eligible",
]
