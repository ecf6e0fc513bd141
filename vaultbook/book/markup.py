"""Literal markup fragments of the book format.

These strings are part of the output contract: generated books are
recognized (and excluded from later runs) by ``BOOK_IGNORE_MARKER``.
"""

from __future__ import annotations

from ..tree_model.eligibility import BOOK_IGNORE_MARKER

KEEP_MARKERS_COMMENT = "<!--dont-delete-these-comments-->"
FULL_PAGE_SPACER = '<div style="page-break-after: always;"></div>'
RULE = "---"
MIN_HEADING_DEPTH = 1
MAX_HEADING_DEPTH = 6


def preamble() -> str:
    return f"\n\n{BOOK_IGNORE_MARKER}\n{KEEP_MARKERS_COMMENT}\n\n"


def clamp_heading_depth(depth: int, depth_offset: int = 0) -> int:
    """Clamp ``depth - depth_offset`` into the Markdown heading range 1..6."""
    return max(MIN_HEADING_DEPTH, min(MAX_HEADING_DEPTH, depth - depth_offset))


def heading(level: int, text: str) -> str:
    return f"{'#' * level} {text}"


def embed(name: str) -> str:
    return f"![[{name}]]"


__all__ = [
    "BOOK_IGNORE_MARKER",
    "KEEP_MARKERS_COMMENT",
    "FULL_PAGE_SPACER",
    "RULE",
    "MIN_HEADING_DEPTH",
    "MAX_HEADING_DEPTH",
    "preamble",
    "clamp_heading_depth",
    "heading",
    "embed",
]
