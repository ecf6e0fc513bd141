"""Removal of previously generated books from a vault."""

from __future__ import annotations

import logging

from ..host import BookHostDeps
from ..tree_model.eligibility import BOOK_IGNORE_MARKER, is_book
from ..vault.fs import FileSystemVault

logger = logging.getLogger(__name__)


def find_books(vault: FileSystemVault) -> list[str]:
    """Return vault paths of every file containing the book marker."""
    return [file.path for file in vault.iter_files() if is_book(vault.read_content(file))]


def remove_all_books(vault: FileSystemVault, host: BookHostDeps) -> list[str]:
    """Delete every generated book after one confirmation.

    Returns the removed paths (empty when cancelled). Read and delete errors
    propagate; files removed before a failure stay removed.
    """
    confirmed = host.confirm(
        "Remove all books?",
        "You are about to delete every book you have created in your vault, proceed? "
        f"WARNING: All files containing the following comment: {BOOK_IGNORE_MARKER} will be deleted",
    )
    if not confirmed:
        return []

    removed: list[str] = []
    for file in list(vault.iter_files()):
        if not is_book(vault.read_content(file)):
            continue
        vault.delete(file)
        logger.debug("removed book %s", file.path)
        removed.append(file.path)

    host.notify(f"Removed {len(removed)} book(s)")
    return removed


__all__ = [
    "find_books",
    "remove_all_books",
]
