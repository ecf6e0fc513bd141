"""Host sinks: confirmation prompts, user notifications, and document opening."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from .highlight import DEFAULT_STYLE, colorize_book


@dataclass(frozen=True)
class BookHostDeps:
    """Callables through which the pipeline talks to its user.

    ``confirm(title, message)`` returns ``True`` to proceed; ``notify`` shows
    one message; ``open_document(path, content)`` presents a written book.
    """

    confirm: Callable[[str, str], bool]
    notify: Callable[[str], None]
    open_document: Callable[[str, str], None]


def terminal_host(
    assume_yes: bool = False,
    show: bool = False,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> BookHostDeps:
    """Build host sinks backed by the terminal.

    Without ``assume_yes`` a non-interactive stdin answers every confirmation
    with *cancel*. ``show`` prints written books (highlighted on a TTY unless
    ``no_color``) instead of just their path.
    """
    in_stream = stdin if stdin is not None else sys.stdin
    out_stream = stdout if stdout is not None else sys.stdout
    err_stream = stderr if stderr is not None else sys.stderr

    def notify(message: str) -> None:
        err_stream.write(message + "\n")
        err_stream.flush()

    def confirm(title: str, message: str) -> bool:
        if assume_yes:
            return True
        if not in_stream.isatty():
            notify(f"{title}: {message} (cancelled, not a terminal; use --yes)")
            return False
        err_stream.write(f"{title}\n{message} [y/N] ")
        err_stream.flush()
        answer = in_stream.readline().strip().lower()
        return answer in {"y", "yes"}

    def open_document(path: str, content: str) -> None:
        if not show:
            out_stream.write(path + "\n")
            return
        use_color = not no_color and out_stream.isatty()
        out_stream.write(colorize_book(content, style) if use_color else content)
        if not content.endswith("\n"):
            out_stream.write("\n")

    return BookHostDeps(confirm=confirm, notify=notify, open_document=open_document)


__all__ = [
    "BookHostDeps",
    "terminal_host",
]
