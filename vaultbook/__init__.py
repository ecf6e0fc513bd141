"""Public package surface for vaultbook.

Exports ``main`` for programmatic CLI invocation and ``generate_book`` for
library use. Most implementation lives in submodules under ``vaultbook``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def generate_book(*args, **kwargs):
    """Lazily import the generation pipeline."""
    from .generate import generate_book as _generate_book

    return _generate_book(*args, **kwargs)


__all__ = ["main", "generate_book"]
