"""Folder selection helpers: fuzzy path ranking over the folder-only walk."""

from __future__ import annotations

from .folders import folder_choices, match_folders, pick_folder
from .fuzzy import fuzzy_score, rank_paths, substring_index

__all__ = [
    "folder_choices",
    "match_folders",
    "pick_folder",
    "fuzzy_score",
    "rank_paths",
    "substring_index",
]
