"""Tests for book naming and the create/overwrite write path."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from vaultbook.book import (
    OUTCOME_CANCELLED,
    OUTCOME_CREATED,
    OUTCOME_FAILED,
    OUTCOME_OVERWRITTEN,
    book_filename,
    write_book,
)
from vaultbook.host import BookHostDeps
from vaultbook.vault import FileSystemVault


class RecordingHost:
    """Host double recording every sink call."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.confirmations: list[tuple[str, str]] = []
        self.notifications: list[str] = []
        self.opened: list[str] = []

    def deps(self) -> BookHostDeps:
        def confirm(title: str, message: str) -> bool:
            self.confirmations.append((title, message))
            return self.answer

        return BookHostDeps(
            confirm=confirm,
            notify=self.notifications.append,
            open_document=lambda path, _content: self.opened.append(path),
        )


class BookFilenameTests(unittest.TestCase):
    def test_whole_tree_book_has_no_suffix(self) -> None:
        self.assertEqual(book_filename("Vault"), "Vault_book.md")

    def test_subtree_book_appends_sanitized_path(self) -> None:
        self.assertEqual(book_filename("Vault", "/Notes/Week 1"), "Vault-Notes-Week-1_book.md")
        self.assertEqual(book_filename("Vault", "/a\\b  c"), "Vault-a-b-c_book.md")


class WriteBookTests(unittest.TestCase):
    def test_creates_new_book_and_opens_it(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            host = RecordingHost()

            outcome = write_book(FileSystemVault(root), host.deps(), "Vault_book.md", "content")

            self.assertEqual(outcome, OUTCOME_CREATED)
            self.assertEqual((root / "Vault_book.md").read_text(encoding="utf-8"), "content")
            self.assertEqual(host.confirmations, [])
            self.assertEqual(host.opened, ["Vault_book.md"])

    def test_existing_book_is_overwritten_after_confirmation(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "Vault_book.md").write_text("old", encoding="utf-8")
            host = RecordingHost(answer=True)

            outcome = write_book(FileSystemVault(root), host.deps(), "Vault_book.md", "new")

            self.assertEqual(outcome, OUTCOME_OVERWRITTEN)
            self.assertEqual((root / "Vault_book.md").read_text(encoding="utf-8"), "new")
            self.assertEqual(host.confirmations[0][0], "Overwrite")
            self.assertIn("Vault_book.md", host.confirmations[0][1])
            self.assertEqual(host.opened, ["Vault_book.md"])

    def test_cancelled_overwrite_leaves_file_untouched(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "Vault_book.md").write_text("old", encoding="utf-8")
            host = RecordingHost(answer=False)

            outcome = write_book(FileSystemVault(root), host.deps(), "Vault_book.md", "new")

            self.assertEqual(outcome, OUTCOME_CANCELLED)
            self.assertEqual((root / "Vault_book.md").read_text(encoding="utf-8"), "old")
            self.assertEqual(host.opened, [])

    def test_write_failure_is_notified_not_raised(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            vault = FileSystemVault(Path(tmp))
            host = RecordingHost()

            with mock.patch.object(FileSystemVault, "create", side_effect=PermissionError("read-only vault")):
                outcome = write_book(vault, host.deps(), "Vault_book.md", "content")

            self.assertEqual(outcome, OUTCOME_FAILED)
            self.assertEqual(host.notifications, ["read-only vault"])
            self.assertEqual(host.opened, [])

    def test_directory_in_the_way_fails_overwrite(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "Vault_book.md").mkdir()
            host = RecordingHost(answer=True)

            outcome = write_book(FileSystemVault(root), host.deps(), "Vault_book.md", "content")

            self.assertEqual(outcome, OUTCOME_FAILED)
            self.assertEqual(len(host.notifications), 1)


if __name__ == "__main__":
    unittest.main()
