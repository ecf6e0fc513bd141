"""Domain datatypes for the note collection (vault) source tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NoteFile:
    """One note file as observed on disk.

    ``path`` is vault-relative and slash-separated (``"A/n1.md"``).
    ``extension`` keeps its leading dot and is empty for extensionless names.
    """

    path: str
    name: str
    extension: str = ""
    created_ns: int | None = None
    modified_ns: int | None = None

    @property
    def basename(self) -> str:
        """File name without its extension."""
        if self.extension and self.name.endswith(self.extension):
            return self.name[: -len(self.extension)]
        return self.name


@dataclass(frozen=True)
class NoteFolder:
    """One folder with its recursively nested, unsorted children.

    The collection root has an empty ``path`` and ``name``.
    """

    path: str
    name: str
    children: tuple["VaultEntry", ...] = ()


VaultEntry = NoteFolder | NoteFile


__all__ = [
    "NoteFile",
    "NoteFolder",
    "VaultEntry",
]
