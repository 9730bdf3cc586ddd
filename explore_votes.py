"""Thin wrapper to run the interactive explorer from the repository root."""
import sys

from vote_explorer.main import main


if __name__ == "__main__":
    sys.exit(main())
