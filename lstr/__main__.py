"""Module entrypoint for ``python -m lstr``."""

from .cli import main


if __name__ == "__main__":
    main()
