"""Module entrypoint for ``python -m treeviz``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and output handling happen in ``treeviz.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
