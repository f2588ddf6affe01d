"""Module entrypoint for ``python -m zebrals``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and pipeline setup happen in ``zebrals.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
