"""Book output naming and the create/overwrite/confirm write path."""

from __future__ import annotations

import logging
import re

from ..host import BookHostDeps
from ..vault.fs import FileSystemVault
from ..vault.types import NoteFile

logger = logging.getLogger(__name__)

BOOK_SUFFIX = "_book.md"
OUTCOME_CREATED = "created"
OUTCOME_OVERWRITTEN = "overwritten"
OUTCOME_CANCELLED = "cancelled"
OUTCOME_FAILED = "failed"

_PATH_SEPARATOR_RE = re.compile(r"\s+|\\|/")


def book_filename(collection_name: str, starting_path: str = "/") -> str:
    """Return ``{collection}{suffix}_book.md`` for a run starting at ``starting_path``.

    Whole-tree runs have no suffix; subtree runs append the starting path
    with whitespace runs and path separators replaced by ``-``.
    """
    suffix = "" if starting_path == "/" else _PATH_SEPARATOR_RE.sub("-", starting_path)
    return f"{collection_name}{suffix}{BOOK_SUFFIX}"


def write_book(vault: FileSystemVault, host: BookHostDeps, filename: str, content: str) -> str:
    """Create or (after confirmation) overwrite ``filename`` with ``content``.

    Returns one of the ``OUTCOME_*`` values. Filesystem errors are reported
    through ``host.notify`` and never raised.
    """
    try:
        if vault.exists(filename):
            confirmed = host.confirm(
                "Overwrite",
                f"A file named {filename} already exists. Do you want to overwrite it?",
            )
            if not confirmed:
                logger.debug("overwrite of %s cancelled", filename)
                return OUTCOME_CANCELLED
            existing = vault.resolve(filename)
            if not isinstance(existing, NoteFile):
                raise IsADirectoryError(f"{filename} is not a file")
            vault.modify(existing, content)
            outcome = OUTCOME_OVERWRITTEN
        else:
            vault.create(filename, content)
            outcome = OUTCOME_CREATED
    except OSError as exc:
        logger.error("could not write %s: %s", filename, exc)
        host.notify(str(exc))
        return OUTCOME_FAILED

    logger.debug("%s %s", outcome, filename)
    host.open_document(filename, content)
    return outcome


__all__ = [
    "BOOK_SUFFIX",
    "OUTCOME_CREATED",
    "OUTCOME_OVERWRITTEN",
    "OUTCOME_CANCELLED",
    "OUTCOME_FAILED",
    "book_filename",
    "write_book",
]
