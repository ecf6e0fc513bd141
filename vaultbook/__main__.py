"""Module entrypoint for ``python -m vaultbook``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and pipeline setup happen in ``vaultbook.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
