"""Package entry point for ``python -m docwrap``."""

from docwrap.cli import main

if __name__ == "__main__":
    main()
