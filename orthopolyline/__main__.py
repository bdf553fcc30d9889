"""Allow ``python -m orthopolyline``."""

from .cli import main

if __name__ == "__main__":
    main()
