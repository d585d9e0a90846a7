#!/usr/bin/env python3
"""KWIC - A key-word-in-context indexer.

Usage:
    python main.py [filename]

Prints every circular shift of every line of the input file, sorted
alphabetically. The input defaults to input.txt.
"""

import sys
from kwic.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
