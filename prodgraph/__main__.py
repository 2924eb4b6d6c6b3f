"""Allow ``python -m prodgraph``."""

from prodgraph.cli import main

if __name__ == "__main__":
    main()
