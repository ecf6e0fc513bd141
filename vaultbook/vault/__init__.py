"""Collaborator side of the book pipeline: the note collection on disk.

This package contains non-pipeline primitives:
- file/folder datatypes with nested children
- directory scanning and a filesystem-backed vault implementation
"""

from __future__ import annotations

from .fs import DirectoryChild, FileSystemVault, list_directory_children, normalize_relative, read_text
from .types import NoteFile, NoteFolder, VaultEntry

__all__ = [
    "NoteFile",
    "NoteFolder",
    "VaultEntry",
    "DirectoryChild",
    "FileSystemVault",
    "list_directory_children",
    "normalize_relative",
    "read_text",
]
