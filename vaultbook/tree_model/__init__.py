"""Tree walking, node eligibility, and table-of-contents construction.

Defines the tagged ``FileEntry``/``FolderEntry`` walk records and the
helpers that turn a note tree into a filtered, ordered, flat entry list.
"""

from __future__ import annotations

from .eligibility import BOOK_IGNORE_MARKER, is_book, is_file_eligible, is_folder_eligible, line_includes_tag
from .toc import FILE_ICON, FOLDER_ICON, TocItem, build_toc, format_toc, is_toc_child, parent_path
from .types import BookEntry, FileEntry, FolderEntry
from .walk import ROOT_PATH, compare_siblings, locale_sort_key, sort_children, walk_vault

__all__ = [
    "BookEntry",
    "FileEntry",
    "FolderEntry",
    "BOOK_IGNORE_MARKER",
    "is_book",
    "is_file_eligible",
    "is_folder_eligible",
    "line_includes_tag",
    "ROOT_PATH",
    "compare_siblings",
    "locale_sort_key",
    "sort_children",
    "walk_vault",
    "FILE_ICON",
    "FOLDER_ICON",
    "TocItem",
    "build_toc",
    "format_toc",
    "is_toc_child",
    "parent_path",
]
