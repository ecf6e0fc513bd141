"""Book document assembly, naming, writing, and cleanup.

Turns a filtered entry list into the single Markdown book and hands it to
the vault, asking the host before overwriting an existing book.
"""

from __future__ import annotations

from .assemble import assemble_book, is_entry_eligible
from .cleanup import find_books, remove_all_books
from .markup import (
    BOOK_IGNORE_MARKER,
    FULL_PAGE_SPACER,
    KEEP_MARKERS_COMMENT,
    RULE,
    clamp_heading_depth,
    embed,
    heading,
    preamble,
)
from .writer import (
    BOOK_SUFFIX,
    OUTCOME_CANCELLED,
    OUTCOME_CREATED,
    OUTCOME_FAILED,
    OUTCOME_OVERWRITTEN,
    book_filename,
    write_book,
)

__all__ = [
    "assemble_book",
    "is_entry_eligible",
    "find_books",
    "remove_all_books",
    "BOOK_IGNORE_MARKER",
    "FULL_PAGE_SPACER",
    "KEEP_MARKERS_COMMENT",
    "RULE",
    "clamp_heading_depth",
    "embed",
    "heading",
    "preamble",
    "BOOK_SUFFIX",
    "OUTCOME_CANCELLED",
    "OUTCOME_CREATED",
    "OUTCOME_FAILED",
    "OUTCOME_OVERWRITTEN",
    "book_filename",
    "write_book",
]
