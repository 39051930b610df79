"""Allow ``python -m giftgraph``."""

from giftgraph.cli import main

if __name__ == "__main__":
    main()
