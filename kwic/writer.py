"""Write any addressable text out as bytes.

Words are written verbatim with a single space between them and a
newline after every line. Only the four addressing primitives are used,
so whatever views are stacked on the text stay opaque here.
"""

import io
from typing import BinaryIO

from .constants import KwicConstants
from .text import AddressableText


def write_text(text: AddressableText, stream: BinaryIO) -> None:
    """Write ``text`` to a binary stream.

    Raises:
        OSError: Writing to the stream failed.
    """
    for line in range(1, text.line_count() + 1):
        words = text.word_count(line)
        out = bytearray()
        for word in range(1, words + 1):
            for char in range(1, text.char_count(line, word) + 1):
                out.append(text.char_at(line, word, char))
            if word < words:
                out += KwicConstants.OUTPUT_WORD_SEPARATOR
        out += KwicConstants.OUTPUT_LINE_TERMINATOR
        stream.write(out)


def format_text(text: AddressableText) -> bytes:
    """Return the bytes ``write_text`` would produce."""
    buffer = io.BytesIO()
    write_text(text, buffer)
    return buffer.getvalue()
