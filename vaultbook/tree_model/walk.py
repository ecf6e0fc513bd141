"""Pre-order traversal of the note tree into flat, depth-annotated entries."""

from __future__ import annotations

import functools
import logging
import unicodedata

from ..rules import ORDER_FILES_FIRST, SORT_CREATION_TIME, RuleSet
from ..vault.types import NoteFile, NoteFolder, VaultEntry
from .eligibility import is_folder_eligible
from .types import BookEntry, FileEntry, FolderEntry

logger = logging.getLogger(__name__)

ROOT_PATH = "/"


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def locale_sort_key(text: str) -> tuple[str, str, str]:
    """Collation key ordering base letters first, then accents, then case.

    ``e`` < ``\u00e9`` < ``f`` and ``a`` < ``A`` < ``b``.
    """
    folded = text.casefold()
    return (_strip_accents(folded), folded, text.swapcase())


def _compare(a: object, b: object) -> int:
    return (a > b) - (a < b)


def compare_siblings(left: VaultEntry, right: VaultEntry, rules: RuleSet) -> int:
    """Two-tier sibling comparator.

    Kind decides first (per ``rules.sibling_order``), then folder names, then
    files by display name or creation time. File ties fall back to name so
    the order never depends on directory scan order.
    """
    left_is_dir = isinstance(left, NoteFolder)
    right_is_dir = isinstance(right, NoteFolder)
    if left_is_dir != right_is_dir:
        files_first = rules.sibling_order == ORDER_FILES_FIRST
        return (1 if left_is_dir else -1) * (1 if files_first else -1)

    if isinstance(left, NoteFolder) or isinstance(right, NoteFolder):
        return _compare(locale_sort_key(left.name), locale_sort_key(right.name))

    if rules.sorting_strategy == SORT_CREATION_TIME:
        by_time = _compare(left.created_ns or 0, right.created_ns or 0)
        if by_time:
            return by_time
    by_name = _compare(locale_sort_key(left.basename), locale_sort_key(right.basename))
    return by_name or _compare(left.name, right.name)


def sort_children(children: tuple[VaultEntry, ...], rules: RuleSet) -> list[VaultEntry]:
    """Return ``children`` ordered by :func:`compare_siblings`."""
    return sorted(children, key=functools.cmp_to_key(lambda a, b: compare_siblings(a, b, rules)))


def entry_path(note: VaultEntry) -> str:
    """Rooted entry path: the root is ``"/"``, descendants gain a leading slash."""
    if not note.path:
        return ROOT_PATH
    return "/" + note.path


def vault_depth(note: VaultEntry) -> int:
    """Depth of ``note`` below the collection root (root is 0)."""
    return len(note.path.split("/")) if note.path else 0


def folder_entry(folder: NoteFolder, depth: int) -> FolderEntry:
    return FolderEntry(
        path=entry_path(folder),
        name=folder.name,
        display_name=folder.name,
        depth=depth,
        child_count=len(folder.children),
        note=folder,
    )


def file_entry(file: NoteFile, depth: int) -> FileEntry:
    return FileEntry(
        path=entry_path(file),
        name=file.name,
        display_name=file.basename,
        depth=depth,
        extension=file.extension,
        created_ns=file.created_ns,
        modified_ns=file.modified_ns,
        note=file,
    )


def walk_vault(
    root: VaultEntry | None,
    rules: RuleSet,
    only_folders: bool = False,
) -> list[BookEntry]:
    """Build the pre-order entry list rooted at ``root``.

    The root folder itself is the first entry. Depths count from the
    collection root, so walking a subfolder keeps its absolute depth.
    Ineligible folders are skipped with their whole subtree; files are always
    recorded and are filtered downstream. ``only_folders`` records folders
    only and is used for starting-folder selection. A missing or non-folder
    root yields ``[]``.
    """
    if not isinstance(root, NoteFolder):
        logger.debug("walk root not found")
        return []

    root_depth = vault_depth(root)
    entries: list[BookEntry] = [folder_entry(root, root_depth)]

    def walk(folder: NoteFolder, depth: int) -> None:
        """Depth-first traversal appending eligible children."""
        for child in sort_children(folder.children, rules):
            if isinstance(child, NoteFolder):
                child_entry = folder_entry(child, depth)
                if not is_folder_eligible(child_entry, rules):
                    logger.debug("skipping folder %s", child_entry.path)
                    continue
                entries.append(child_entry)
                walk(child, depth + 1)
                continue
            if not only_folders:
                entries.append(file_entry(child, depth))

    walk(root, root_depth + 1)
    logger.debug("walked %d entries", len(entries))
    return entries


__all__ = [
    "ROOT_PATH",
    "locale_sort_key",
    "compare_siblings",
    "sort_children",
    "entry_path",
    "vault_depth",
    "folder_entry",
    "file_entry",
    "walk_vault",
]
