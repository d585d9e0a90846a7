"""KWIC command line entry point.

Allows running via `python -m kwic` and provides the console script
defined in `pyproject.toml`.

Usage:
    kwic [filename]

Reads the named file (``input.txt`` when omitted), and writes every
circular shift of every line, alphabetized, to standard output.
"""

from __future__ import annotations

import logging
import sys

from .constants import KwicConstants
from .reader import read_file
from .shift import ShiftView
from .sorted_view import SortedView
from .terminal import report_error
from .writer import write_text

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    filename = args[0] if args else KwicConstants.DEFAULT_INPUT_FILENAME

    try:
        store = read_file(filename)
    except OSError as e:
        report_error(KwicConstants.READ_ERROR_MESSAGE.format(filename, e))
        return KwicConstants.EXIT_FAILURE

    shifted = ShiftView(store)
    alphabetized = SortedView(shifted)
    logger.debug("Writing %d shifted lines", alphabetized.line_count())

    try:
        write_text(alphabetized, sys.stdout.buffer)
        sys.stdout.buffer.flush()
    except OSError as e:
        report_error(KwicConstants.WRITE_ERROR_MESSAGE.format(e))
        return KwicConstants.EXIT_FAILURE
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
