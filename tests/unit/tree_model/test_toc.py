"""Tests for table-of-contents child selection and rendering."""

from __future__ import annotations

import unittest

from vaultbook.rules import RuleSet
from vaultbook.tree_model import (
    FILE_ICON,
    FOLDER_ICON,
    BOOK_IGNORE_MARKER,
    FileEntry,
    FolderEntry,
    TocItem,
    build_toc,
    format_toc,
    is_toc_child,
    parent_path,
)


def folder(path: str, depth: int, child_count: int = 1) -> FolderEntry:
    name = path.rsplit("/", 1)[-1]
    return FolderEntry(path=path, name=name, display_name=name, depth=depth, child_count=child_count)


def file(path: str, depth: int) -> FileEntry:
    name = path.rsplit("/", 1)[-1]
    return FileEntry(path=path, name=name, display_name=name.rsplit(".", 1)[0], depth=depth, extension=".md")


ENTRIES = [
    folder("/", 0),
    file("/root.md", 1),
    folder("/Notes", 1),
    file("/Notes/a.md", 2),
    folder("/Notes2", 1),
    file("/Notes2/b.md", 2),
]


def no_content(_entry: FileEntry) -> str:
    return ""


class TocChildSelectionTests(unittest.TestCase):
    def test_parent_path(self) -> None:
        self.assertEqual(parent_path("/Notes/a.md"), "/Notes")
        self.assertEqual(parent_path("/Notes"), "/")
        self.assertEqual(parent_path("/"), "/")

    def test_strict_scoping_excludes_prefix_sibling(self) -> None:
        children = [entry.path for entry in ENTRIES if is_toc_child(entry, "/Notes", 1)]

        self.assertEqual(children, ["/Notes/a.md"])

    def test_legacy_scoping_overmatches_prefix_sibling(self) -> None:
        children = [entry.path for entry in ENTRIES if is_toc_child(entry, "/Notes", 1, legacy=True)]

        self.assertEqual(children, ["/Notes/a.md", "/Notes2/b.md"])

    def test_root_toc_lists_depth_one_entries_in_walk_order(self) -> None:
        items = build_toc("/", 0, ENTRIES, RuleSet(), no_content)

        self.assertEqual(
            items,
            [
                TocItem(FILE_ICON, "root"),
                TocItem(FOLDER_ICON, "Notes"),
                TocItem(FOLDER_ICON, "Notes2"),
            ],
        )


class BuildTocTests(unittest.TestCase):
    def test_ineligible_children_are_left_out(self) -> None:
        entries = [
            folder("/", 0),
            file("/keep.md", 1),
            file("/Vault_book.md", 1),
            folder("/Archive", 1),
        ]
        contents = {"/keep.md": "text", "/Vault_book.md": BOOK_IGNORE_MARKER}
        rules = RuleSet(folders_to_ignore=("Archive",))

        items = build_toc("/", 0, entries, rules, lambda entry: contents[entry.path])

        self.assertEqual(items, [TocItem(FILE_ICON, "keep")])

    def test_no_children_renders_blank(self) -> None:
        items = build_toc("/Empty", 1, [folder("/Empty", 1, child_count=0)], RuleSet(), no_content)

        self.assertEqual(items, [])
        self.assertEqual(format_toc(items), "")

    def test_format_toc_renders_reference_links(self) -> None:
        rendered = format_toc([TocItem(FOLDER_ICON, "A"), TocItem(FILE_ICON, "root")])

        self.assertEqual(rendered, "\U0001F4C2 [[#A]]\n\U0001F4C4 [[#root]]\n")


if __name__ == "__main__":
    unittest.main()
