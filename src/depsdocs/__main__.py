"""Entry point for ``python -m depsdocs``."""

from depsdocs.cli import main

if __name__ == "__main__":
    main()
