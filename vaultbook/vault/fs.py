"""Directory-backed vault: scanning, reading, and writing note files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .types import NoteFile, NoteFolder, VaultEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child plus the stat data the walk needs."""

    name: str
    path: Path
    is_dir: bool
    created_ns: int | None
    modified_ns: int | None


def read_text(path: Path) -> str:
    """Read ``path`` as text, trying common encodings before lossy decode.

    ``OSError`` from the underlying read is propagated to the caller.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def _created_ns(stat: os.stat_result) -> int:
    """Return birth time when the platform records it, else ``st_ctime_ns``."""
    birthtime = getattr(stat, "st_birthtime", None)
    if birthtime is not None:
        return int(birthtime * 1_000_000_000)
    return int(stat.st_ctime_ns)


def list_directory_children(
    directory: Path,
    show_hidden: bool,
) -> tuple[list[DirectoryChild], Exception | None]:
    """List visible children of ``directory`` in name order.

    Symlinks are followed; entries that are neither a directory nor a
    regular file (broken links included) are left out. Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned; children are then empty.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue

                try:
                    is_dir = child.is_dir()
                    is_file = not is_dir and child.is_file()
                except OSError:
                    continue
                # broken links, sockets and other special files
                if not is_dir and not is_file:
                    continue

                created_ns: int | None = None
                modified_ns: int | None = None
                if is_file:
                    try:
                        stat = child.stat()
                        created_ns = _created_ns(stat)
                        modified_ns = int(stat.st_mtime_ns)
                    except OSError:
                        pass

                children.append(
                    DirectoryChild(
                        name=name,
                        path=Path(child.path),
                        is_dir=is_dir,
                        created_ns=created_ns,
                        modified_ns=modified_ns,
                    )
                )
    except (PermissionError, OSError) as exc:
        return [], exc

    children.sort(key=lambda item: item.name)
    return children, None


def normalize_relative(path: str) -> str:
    """Normalize a vault path to its slash-separated relative form.

    ``"/"``, ``""`` and ``"."`` all denote the collection root (``""``).
    """
    parts = [part for part in path.replace("\\", "/").split("/") if part and part != "."]
    return "/".join(parts)


def _split_extension(name: str) -> str:
    suffix = Path(name).suffix
    return suffix if suffix != name else ""


class FileSystemVault:
    """Note collection rooted at a local directory.

    Implements the narrow collaborator surface used by the book pipeline:
    ``resolve``, ``read_content``, ``exists``, ``create``, ``modify`` plus
    ``delete`` and ``iter_files`` for generated-book cleanup.
    """

    def __init__(self, root: Path, show_hidden: bool = False) -> None:
        self.root = Path(root).resolve()
        self.show_hidden = show_hidden

    @property
    def name(self) -> str:
        """Collection name used for the book title and output filename."""
        return self.root.name

    def absolute_path(self, path: str) -> Path:
        """Map a vault path onto the filesystem, refusing paths outside the root."""
        relative = normalize_relative(path)
        if any(part == ".." for part in relative.split("/")):
            raise ValueError(f"path escapes vault root: {path!r}")
        return self.root / relative if relative else self.root

    def _build_folder(
        self,
        directory: Path,
        relative: str,
        ancestors: frozenset[Path] = frozenset(),
    ) -> NoteFolder:
        """Scan ``directory`` recursively; a linked folder that loops back to an ancestor stays empty."""
        real = directory.resolve()
        if real in ancestors:
            logger.debug("skipping symlink cycle at %s", directory)
            return NoteFolder(path=relative, name=relative.rsplit("/", 1)[-1], children=())
        ancestors = ancestors | {real}
        children, scan_error = list_directory_children(directory, self.show_hidden)
        if scan_error is not None:
            logger.debug("could not scan %s: %s", directory, scan_error)
        nodes: list[VaultEntry] = []
        for child in children:
            child_relative = f"{relative}/{child.name}" if relative else child.name
            if child.is_dir:
                nodes.append(self._build_folder(child.path, child_relative, ancestors))
                continue
            nodes.append(
                NoteFile(
                    path=child_relative,
                    name=child.name,
                    extension=_split_extension(child.name),
                    created_ns=child.created_ns,
                    modified_ns=child.modified_ns,
                )
            )
        name = relative.rsplit("/", 1)[-1] if relative else ""
        return NoteFolder(path=relative, name=name, children=tuple(nodes))

    def resolve(self, path: str) -> VaultEntry | None:
        """Resolve ``path`` to a file or fully scanned folder, or ``None``."""
        try:
            target = self.absolute_path(path)
        except ValueError:
            return None
        relative = normalize_relative(path)
        if target.is_dir():
            return self._build_folder(target, relative)
        if target.is_file():
            try:
                stat = target.stat()
            except OSError:
                return None
            return NoteFile(
                path=relative,
                name=target.name,
                extension=_split_extension(target.name),
                created_ns=_created_ns(stat),
                modified_ns=int(stat.st_mtime_ns),
            )
        return None

    def read_content(self, file: NoteFile) -> str:
        """Return the full text of ``file``; ``OSError`` propagates."""
        return read_text(self.absolute_path(file.path))

    def exists(self, path: str) -> bool:
        return self.absolute_path(path).exists()

    def create(self, path: str, text: str) -> NoteFile:
        """Create a new file; fails with ``FileExistsError`` if one is present."""
        target = self.absolute_path(path)
        with target.open("x", encoding="utf-8") as handle:
            handle.write(text)
        resolved = self.resolve(path)
        if not isinstance(resolved, NoteFile):
            raise FileNotFoundError(f"created file vanished: {path}")
        return resolved

    def modify(self, file: NoteFile, text: str) -> None:
        self.absolute_path(file.path).write_text(text, encoding="utf-8")

    def delete(self, file: NoteFile) -> None:
        self.absolute_path(file.path).unlink()

    def iter_files(self) -> Iterator[NoteFile]:
        """Yield every visible file in the vault in pre-order."""
        root = self.resolve("")
        if not isinstance(root, NoteFolder):
            return
        stack: list[VaultEntry] = [root]
        while stack:
            entry = stack.pop()
            if isinstance(entry, NoteFile):
                yield entry
                continue
            stack.extend(reversed(entry.children))


__all__ = [
    "DirectoryChild",
    "FileSystemVault",
    "list_directory_children",
    "normalize_relative",
    "read_text",
]
