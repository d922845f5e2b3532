"""Allow ``python -m macconv``."""

from macconv.cli import main

if __name__ == "__main__":
    main()
