"""Command-line front door for vaultbook.

Parses CLI options, resolves the vault and starting folder, and merges
stored rules with per-run overrides. Then dispatches into the pipeline.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from . import config
from .book.cleanup import find_books, remove_all_books
from .book.writer import OUTCOME_FAILED
from .generate import STATUS_FOLDER_MISSING, STATUS_ROOT_MISSING, build_book_text, generate_book, resolve_start
from .highlight import DEFAULT_STYLE, colorize_book
from .host import terminal_host
from .rules import SIBLING_ORDERS, SORTING_STRATEGIES, RuleSet
from .search.folders import match_folders, pick_folder
from .vault.fs import FileSystemVault
from .vault.types import NoteFolder


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compile a folder of notes into a single Markdown book with tables of contents."
    )
    parser.add_argument("path", nargs="?", default=None, help="Vault directory. Defaults to current directory.")

    start = parser.add_argument_group("starting folder")
    start.add_argument("--from", dest="start_folder", metavar="FOLDER", help="Build a book from FOLDER only.")
    start.add_argument("--pick", metavar="QUERY", help="Build a book from the folder best matching QUERY.")
    start.add_argument(
        "--list-folders",
        nargs="?",
        const="",
        default=None,
        metavar="QUERY",
        help="List folders a book can start from (optionally fuzzy-filtered) and exit.",
    )

    books = parser.add_argument_group("generated books")
    books.add_argument("--list-books", action="store_true", help="List generated books in the vault and exit.")
    books.add_argument("--remove-books", action="store_true", help="Delete every generated book in the vault.")

    rules = parser.add_argument_group("rules (added to the stored config)")
    rules.add_argument("--ignore-folder", action="append", default=[], metavar="NAME", help="Folder name to skip.")
    rules.add_argument("--ignore-file", action="append", default=[], metavar="NAME", help="File name to skip.")
    rules.add_argument(
        "--ignore-extension", action="append", default=[], metavar="EXT", help="Extension to skip, e.g. .pdf."
    )
    rules.add_argument("--ignore-tag", action="append", default=[], metavar="TAG", help="Skip notes carrying TAG.")
    rules.add_argument("--no-toc", action="store_true", help="Do not emit tables of contents.")
    rules.add_argument("--include-empty-folders", action="store_true", help="Keep headings for empty folders.")
    rules.add_argument("--sort", choices=SORTING_STRATEGIES, default=None, help="How to order sibling files.")
    rules.add_argument("--order", choices=SIBLING_ORDERS, default=None, help="Files or folders first.")
    rules.add_argument("--legacy-toc", action="store_true", help="Use path-containment TOC child matching.")
    rules.add_argument("--save-rules", action="store_true", help="Persist the effective rules to the config file.")

    output = parser.add_argument_group("output")
    output.add_argument("--dry-run", action="store_true", help="Print the book instead of writing it.")
    output.add_argument("--yes", action="store_true", help="Overwrite or delete without asking.")
    output.add_argument("--show", action="store_true", help="Print the written book instead of its path.")
    output.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for printed books.")
    output.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    output.add_argument("--show-hidden", action="store_true", help="Include dot-files and dot-folders.")
    output.add_argument("--verbose", "-v", action="store_true", help="Log pipeline details to stderr.")
    return parser


def effective_rules(stored: RuleSet, args: argparse.Namespace) -> RuleSet:
    """Merge CLI overrides into ``stored`` rules."""
    return dataclasses.replace(
        stored,
        folders_to_ignore=stored.folders_to_ignore + tuple(args.ignore_folder),
        files_to_ignore=stored.files_to_ignore + tuple(args.ignore_file),
        extensions_to_ignore=stored.extensions_to_ignore + tuple(args.ignore_extension),
        tags_to_ignore=stored.tags_to_ignore + tuple(args.ignore_tag),
        generate_tocs=stored.generate_tocs and not args.no_toc,
        include_empty_folders=stored.include_empty_folders or args.include_empty_folders,
        sorting_strategy=args.sort or stored.sorting_strategy,
        sibling_order=args.order or stored.sibling_order,
        legacy_toc_scoping=stored.legacy_toc_scoping or args.legacy_toc,
    ).normalized()


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and generate (or manage) books for one vault.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used as the vault.
    """
    args = _build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.start_folder is not None and args.pick is not None:
        raise SystemExit("Cannot combine --from with --pick.")

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.is_dir():
        raise SystemExit(f"Vault not found: {path}")

    vault = FileSystemVault(path, show_hidden=args.show_hidden)
    rules = effective_rules(config.load_rules(), args)
    if args.save_rules:
        config.save_rules(rules)

    if args.list_folders is not None:
        for folder in match_folders(vault, rules, args.list_folders):
            sys.stdout.write(folder + "\n")
        return

    try:
        if args.list_books:
            for book in find_books(vault):
                sys.stdout.write(book + "\n")
            return

        host = terminal_host(assume_yes=args.yes, show=args.show, style=args.style, no_color=args.no_color)
        if args.remove_books:
            remove_all_books(vault, host)
            return

        start_folder = args.start_folder or "/"
        if args.pick is not None:
            picked = pick_folder(vault, rules, args.pick)
            if picked is None:
                raise SystemExit(f"No folder matches: {args.pick}")
            host.notify(f"Selected {picked}")
            start_folder = picked
        start = resolve_start(start_folder)

        if args.dry_run:
            if not start.whole_tree and not isinstance(vault.resolve(start.path), NoteFolder):
                raise SystemExit(f"Could not find folder: {start.path}")
            text = build_book_text(vault, rules, start)
            if text is None:
                raise SystemExit("Empty vault")
            use_color = not args.no_color and sys.stdout.isatty()
            sys.stdout.write(colorize_book(text, args.style) if use_color else text)
            return

        result = generate_book(vault, rules, host, start)
    except OSError as exc:
        raise SystemExit(str(exc)) from exc

    if result.status in {STATUS_ROOT_MISSING, STATUS_FOLDER_MISSING, OUTCOME_FAILED}:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
