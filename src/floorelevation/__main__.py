"""Command-line interface."""
import sys

from floorelevation.cli import main

if __name__ == "__main__":
    sys.exit(main())
