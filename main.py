"""Application entrypoint for the brickset queries.
Run with: python main.py [COMMAND ...]
"""
import sys

from brickset.cli import main

if __name__ == "__main__":
    sys.exit(main())
