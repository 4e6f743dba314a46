"""Module entrypoint for ``python -m navplan``."""

from navplan.cli import main

if __name__ == "__main__":
    main()
