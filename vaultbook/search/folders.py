"""Starting-folder choices for subtree books."""

from __future__ import annotations

from ..rules import RuleSet
from ..tree_model.types import FolderEntry
from ..tree_model.walk import walk_vault
from ..vault.fs import FileSystemVault
from .fuzzy import rank_paths


def folder_choices(vault: FileSystemVault, rules: RuleSet) -> list[str]:
    """Return rooted paths of every folder a book can start from, in walk order.

    Only folders are visited, so no note content is read.
    """
    entries = walk_vault(vault.resolve(""), rules, only_folders=True)
    return [entry.path for entry in entries if isinstance(entry, FolderEntry)]


def match_folders(vault: FileSystemVault, rules: RuleSet, query: str, limit: int = 200) -> list[str]:
    """Return folder paths matching ``query``, best first; all folders for an empty query."""
    choices = folder_choices(vault, rules)
    if not query:
        return choices[: max(1, limit)]
    return [path for path, _score in rank_paths(query, choices, limit=limit)]


def pick_folder(vault: FileSystemVault, rules: RuleSet, query: str) -> str | None:
    """Return the best-matching folder path for ``query`` or ``None``."""
    matches = match_folders(vault, rules, query, limit=1)
    return matches[0] if matches else None


__all__ = [
    "folder_choices",
    "match_folders",
    "pick_folder",
]
