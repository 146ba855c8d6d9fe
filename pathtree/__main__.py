"""Module entrypoint for ``python -m pathtree``.

All argument parsing and output happen in ``pathtree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
