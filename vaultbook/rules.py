"""Inclusion/exclusion and ordering rules for one book generation run."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

SORT_ALPHABETICAL = "alphabetical"
SORT_CREATION_TIME = "creation-time"
SORTING_STRATEGIES = (SORT_ALPHABETICAL, SORT_CREATION_TIME)

ORDER_FILES_FIRST = "files-first"
ORDER_FOLDERS_FIRST = "folders-first"
SIBLING_ORDERS = (ORDER_FILES_FIRST, ORDER_FOLDERS_FIRST)


def clean_patterns(patterns: Iterable[str]) -> tuple[str, ...]:
    """Trim patterns and drop blank entries, preserving order."""
    cleaned: list[str] = []
    for pattern in patterns:
        stripped = str(pattern).strip()
        if stripped:
            cleaned.append(stripped)
    return tuple(cleaned)


@dataclass(frozen=True)
class RuleSet:
    """Immutable rule snapshot; empty pattern tuples never exclude anything.

    ``legacy_toc_scoping`` restores the historical table-of-contents child
    selection (depth + 1 and path containment) instead of parent equality.
    """

    folders_to_ignore: tuple[str, ...] = ()
    files_to_ignore: tuple[str, ...] = ()
    extensions_to_ignore: tuple[str, ...] = ()
    tags_to_ignore: tuple[str, ...] = ()
    include_empty_folders: bool = False
    sorting_strategy: str = SORT_ALPHABETICAL
    sibling_order: str = ORDER_FILES_FIRST
    generate_tocs: bool = True
    legacy_toc_scoping: bool = False

    def normalized(self) -> RuleSet:
        """Return a copy with cleaned patterns and valid option values."""
        sorting = self.sorting_strategy if self.sorting_strategy in SORTING_STRATEGIES else SORT_ALPHABETICAL
        order = self.sibling_order if self.sibling_order in SIBLING_ORDERS else ORDER_FILES_FIRST
        return RuleSet(
            folders_to_ignore=clean_patterns(self.folders_to_ignore),
            files_to_ignore=clean_patterns(self.files_to_ignore),
            extensions_to_ignore=clean_patterns(self.extensions_to_ignore),
            tags_to_ignore=clean_patterns(self.tags_to_ignore),
            include_empty_folders=bool(self.include_empty_folders),
            sorting_strategy=sorting,
            sibling_order=order,
            generate_tocs=bool(self.generate_tocs),
            legacy_toc_scoping=bool(self.legacy_toc_scoping),
        )


__all__ = [
    "SORT_ALPHABETICAL",
    "SORT_CREATION_TIME",
    "SORTING_STRATEGIES",
    "ORDER_FILES_FIRST",
    "ORDER_FOLDERS_FIRST",
    "SIBLING_ORDERS",
    "RuleSet",
    "clean_patterns",
]
