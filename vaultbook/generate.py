"""Book generation pipeline: walk, filter, assemble, write.

``resolve_start`` turns a chosen folder path into a :class:`StartPoint`;
``generate_book`` then runs one complete, stateless generation for it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .book.assemble import assemble_book
from .book.writer import book_filename, write_book
from .host import BookHostDeps
from .rules import RuleSet
from .tree_model.types import BookEntry, FileEntry
from .tree_model.walk import ROOT_PATH, walk_vault
from .vault.fs import FileSystemVault, normalize_relative
from .vault.types import NoteFolder

logger = logging.getLogger(__name__)

STATUS_ROOT_MISSING = "root-missing"
STATUS_FOLDER_MISSING = "folder-missing"


@dataclass(frozen=True)
class StartPoint:
    """Where a run starts and how many heading levels its entries shift up."""

    path: str = ROOT_PATH
    depth_offset: int = 0

    @property
    def whole_tree(self) -> bool:
        return self.path == ROOT_PATH


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one run: a ``STATUS_*`` or writer ``OUTCOME_*`` value."""

    status: str
    filename: str | None = None
    content: str | None = None


def normalize_start_path(path: str) -> str:
    """Return the rooted form of ``path`` (``"Notes/"`` -> ``"/Notes"``)."""
    relative = normalize_relative(path)
    return "/" + relative if relative else ROOT_PATH


def resolve_start(path: str) -> StartPoint:
    """Map a chosen folder path to its start point.

    The offset is the number of separators above the folder, so a sub-book
    always opens with level-1 headings.
    """
    rooted = normalize_start_path(path)
    return StartPoint(path=rooted, depth_offset=max(0, rooted.count("/") - 1))


def select_subtree(entries: Sequence[BookEntry], start_path: str) -> list[BookEntry]:
    """Keep the entries at or below ``start_path``."""
    if start_path == ROOT_PATH:
        return list(entries)
    prefix = start_path.rstrip("/") + "/"
    return [entry for entry in entries if entry.path == start_path or entry.path.startswith(prefix)]


def content_reader(vault: FileSystemVault) -> Callable[[FileEntry], str]:
    """Return a per-run reader that reads each note at most once."""
    cache: dict[str, str] = {}

    def read_content(entry: FileEntry) -> str:
        cached = cache.get(entry.path)
        if cached is not None:
            return cached
        if entry.note is None:
            raise FileNotFoundError(f"no source note for {entry.path}")
        content = vault.read_content(entry.note)
        cache[entry.path] = content
        return content

    return read_content


def build_book_text(
    vault: FileSystemVault,
    rules: RuleSet,
    start: StartPoint,
    root: NoteFolder | None = None,
) -> str | None:
    """Assemble the book text for ``start``; ``None`` when the vault root is missing.

    ``root`` reuses an already scanned vault root. Content read errors propagate.
    """
    entries = walk_vault(root if root is not None else vault.resolve(""), rules)
    if not entries:
        return None
    selected = select_subtree(entries, start.path)
    logger.debug("%d of %d entries under %s", len(selected), len(entries), start.path)
    return assemble_book(
        selected,
        rules,
        vault.name,
        content_reader(vault),
        depth_offset=start.depth_offset,
        whole_tree=start.whole_tree,
    )


def generate_book(
    vault: FileSystemVault,
    rules: RuleSet,
    host: BookHostDeps,
    start: StartPoint | None = None,
) -> GenerationResult:
    """Run one generation and write the book into the vault root.

    A missing vault root or starting folder aborts with a notification and
    nothing written. Content read errors propagate; write errors are
    reported by the writer.
    """
    start = start or StartPoint()
    rules = rules.normalized()

    root = vault.resolve("")
    if not isinstance(root, NoteFolder):
        host.notify("Empty vault")
        return GenerationResult(STATUS_ROOT_MISSING)
    if not start.whole_tree and not isinstance(vault.resolve(start.path), NoteFolder):
        host.notify(f"Could not find folder: {start.path}")
        return GenerationResult(STATUS_FOLDER_MISSING)

    content = build_book_text(vault, rules, start, root=root)
    if content is None:
        host.notify("Empty vault")
        return GenerationResult(STATUS_ROOT_MISSING)

    filename = book_filename(vault.name, start.path)
    outcome = write_book(vault, host, filename, content)
    return GenerationResult(outcome, filename=filename, content=content)


__all__ = [
    "STATUS_ROOT_MISSING",
    "STATUS_FOLDER_MISSING",
    "StartPoint",
    "GenerationResult",
    "normalize_start_path",
    "resolve_start",
    "select_subtree",
    "content_reader",
    "build_book_text",
    "generate_book",
]
