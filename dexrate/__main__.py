"""Allow ``python -m dexrate``."""

from dexrate.cli import main

if __name__ == "__main__":
    main()
