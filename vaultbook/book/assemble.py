"""Book text assembly from a filtered, ordered entry list."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..rules import RuleSet
from ..tree_model.eligibility import is_file_eligible, is_folder_eligible
from ..tree_model.toc import build_toc, format_toc
from ..tree_model.types import BookEntry, FileEntry, FolderEntry
from .markup import FULL_PAGE_SPACER, RULE, clamp_heading_depth, embed, heading, preamble

logger = logging.getLogger(__name__)


def _title_block(title: str, toc: str) -> str:
    return f"{heading(1, title)}\n\n{toc}\n\n{RULE}\n\n{FULL_PAGE_SPACER}\n\n"


def _folder_block(entry: FolderEntry, level: int, toc: str) -> str:
    separator = FULL_PAGE_SPACER if level == 1 else RULE
    return f"{separator}\n\n{heading(level, entry.display_name)}\n\n{toc}\n\n{RULE}\n\n"


def _file_block(entry: FileEntry, level: int) -> str:
    return f"\n\n{heading(level, entry.display_name)}\n\n{embed(entry.name)}\n\n{RULE}\n\n"


def is_entry_eligible(entry: BookEntry, rules: RuleSet, read_content: Callable[[FileEntry], str]) -> bool:
    if isinstance(entry, FolderEntry):
        return is_folder_eligible(entry, rules)
    return is_file_eligible(entry, rules, read_content(entry))


def assemble_book(
    entries: Sequence[BookEntry],
    rules: RuleSet,
    title: str,
    read_content: Callable[[FileEntry], str],
    depth_offset: int = 0,
    whole_tree: bool = True,
) -> str:
    """Render the book for ``entries`` and return its full text.

    In whole-tree runs the depth-0 root entry becomes the title heading with
    the collection's top-level TOC. Every other eligible entry gets a heading
    at ``clamp(depth - depth_offset, 1, 6)``: folders with their TOC, files
    with an embed of the note. Ineligible entries are dropped. No I/O happens
    here beyond ``read_content``.
    """
    parts: list[str] = [preamble()]

    for entry in entries:
        if not is_entry_eligible(entry, rules, read_content):
            logger.debug("excluding %s", entry.path)
            continue

        if isinstance(entry, FileEntry):
            parts.append(_file_block(entry, clamp_heading_depth(entry.depth, depth_offset)))
            continue

        toc = ""
        if rules.generate_tocs:
            toc = format_toc(build_toc(entry.path, entry.depth, entries, rules, read_content))

        if whole_tree and entry.depth == 0:
            parts.append(_title_block(title, toc))
            continue
        parts.append(_folder_block(entry, clamp_heading_depth(entry.depth, depth_offset), toc))

    return "".join(parts)


__all__ = [
    "is_entry_eligible",
    "assemble_book",
]
