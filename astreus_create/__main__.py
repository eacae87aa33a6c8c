"""Allow ``python -m astreus_create``."""

from astreus_create.cli import main

if __name__ == "__main__":
    main()
