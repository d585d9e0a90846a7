"""Read a document of lines of words into a LineStore.

A space ends a word and a newline ends a line; every other byte is part
of a word. Runs of spaces collapse, so no empty words are produced. A
line holding no words is kept as an empty line.
"""

import logging
from typing import BinaryIO

from .constants import KwicConstants
from .line_store import LineStore, LineStoreBuilder

logger = logging.getLogger(__name__)


def read_stream(stream: BinaryIO) -> LineStore:
    """Read every byte of a binary stream into a LineStore.

    Args:
        stream: Binary file-like object positioned at the start of the
            document.

    Returns:
        The finished store.

    Raises:
        OSError: Reading from the stream failed.
    """
    builder = LineStoreBuilder()
    line = word = char = 0
    line_open = word_open = False

    while True:
        chunk = stream.read(KwicConstants.READ_CHUNK_SIZE)
        if not chunk:
            break
        for value in chunk:
            if not line_open:
                builder.append_line()
                line += 1
                word = 0
                line_open = True
                word_open = False
            if value == KwicConstants.LINE_SEPARATOR:
                line_open = False
            elif value == KwicConstants.WORD_SEPARATOR:
                word_open = False
            else:
                if word_open:
                    char += 1
                else:
                    word += 1
                    char = 1
                    word_open = True
                builder.append_char(line, word, char, value)

    store = builder.finish()
    logger.debug("Read %d lines", store.line_count())
    return store


def read_file(filename: str) -> LineStore:
    """Read the named file into a LineStore.

    Raises:
        OSError: The file could not be opened or read.
    """
    with open(filename, 'rb') as f:
        return read_stream(f)
