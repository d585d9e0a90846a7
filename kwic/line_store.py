"""Line storage: the leaf of every text pipeline.

A ``LineStoreBuilder`` grows strictly sequentially, one character at a
time, and is then finished into an immutable ``LineStore``. The store is
what the shift and sort views wrap.
"""

from typing import Iterable, Optional

from .errors import AppendOrderError, BuilderFinishedError
from .text import AddressableText, check_index


class LineStore(AddressableText):
    """Immutable lines of words of bytes."""

    def __init__(self, lines: tuple[tuple[bytes, ...], ...] = ()):
        self._lines = lines

    @classmethod
    def from_lines(cls, lines: Iterable[Iterable[bytes]]) -> "LineStore":
        """Build a store directly from nested words.

        Unlike the builder this accepts empty words.
        """
        return cls(tuple(tuple(bytes(word) for word in line) for line in lines))

    def line_count(self) -> int:
        return len(self._lines)

    def word_count(self, line: int) -> int:
        check_index("line", line, len(self._lines))
        return len(self._lines[line - 1])

    def char_count(self, line: int, word: int) -> int:
        return len(self._word(line, word))

    def char_at(self, line: int, word: int, char: int) -> int:
        chars = self._word(line, word)
        check_index("char", char, len(chars))
        return chars[char - 1]

    def _word(self, line: int, word: int) -> bytes:
        check_index("line", line, len(self._lines))
        words = self._lines[line - 1]
        check_index("word", word, len(words))
        return words[word - 1]

    def __repr__(self):
        return f"LineStore({self._lines!r})"


class LineStoreBuilder:
    """Append-only writer producing a LineStore.

    Content grows at the end only: the next character of the last word,
    the first character of a new word on the last line, or the first
    character of a word on a new line.
    """

    def __init__(self):
        self._lines: Optional[list[list[bytearray]]] = []

    def _content(self) -> list[list[bytearray]]:
        if self._lines is None:
            raise BuilderFinishedError("Builder already finished", "ERLSBF")
        return self._lines

    def line_count(self) -> int:
        return len(self._content())

    def word_count(self, line: int) -> int:
        lines = self._content()
        check_index("line", line, len(lines))
        return len(lines[line - 1])

    def char_count(self, line: int, word: int) -> int:
        lines = self._content()
        check_index("line", line, len(lines))
        check_index("word", word, len(lines[line - 1]))
        return len(lines[line - 1][word - 1])

    def append_line(self) -> None:
        """Append an empty line after the current last line."""
        self._content().append([])

    def append_char(self, line: int, word: int, char: int, value: int) -> None:
        """Append ``value`` at ``(line, word, char)``.

        Raises:
            AppendOrderError: The position is not directly after the
                current content, or ``value`` is not a byte.
            BuilderFinishedError: ``finish()`` was already called.
        """
        lines = self._content()
        if not 0 <= value <= 255:
            raise AppendOrderError(f"Value {value!r} is not a byte", "ERLSBV")

        line_total = len(lines)
        if line < max(line_total, 1) or line > line_total + 1:
            raise AppendOrderError("Line not last or just past last", "ERLSBL")
        word_total = len(lines[line - 1]) if line == line_total else 0
        if word < max(word_total, 1) or word > word_total + 1:
            raise AppendOrderError("Word not last or just past last", "ERLSBW")
        char_total = 0
        if line == line_total and word == word_total:
            char_total = len(lines[line - 1][word - 1])
        if char != char_total + 1:
            raise AppendOrderError("Char not just past last", "ERLSBC")

        if line == line_total + 1:
            lines.append([])
        if word == word_total + 1:
            lines[line - 1].append(bytearray())
        lines[line - 1][word - 1].append(value)

    def finish(self) -> LineStore:
        """Freeze the content into a LineStore; the builder is spent afterwards."""
        lines = self._content()
        self._lines = None
        return LineStore.from_lines(lines)
