"""Module entrypoint for ``python -m relname``.

All argument parsing happens in ``relname.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
