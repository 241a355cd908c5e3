"""Allow running the package as `python -m gradaudit`."""

from .cli import main

if __name__ == "__main__":
    main()
