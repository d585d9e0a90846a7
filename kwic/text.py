"""Addressable text: the contract shared by the line store and every view.

Text is addressed by 1-based ``(line, word, char)`` triples. Characters
are raw byte values (0..255); no decoding ever takes place.
"""

from abc import ABC, abstractmethod

from .errors import AddressError

_ADDRESS_TAGS = {
    "line": "ERADDL",
    "word": "ERADDW",
    "char": "ERADDC",
}


def check_index(kind: str, index: int, count: int) -> None:
    """Raise AddressError unless ``1 <= index <= count``.

    Args:
        kind: One of "line", "word" or "char"; selects the diagnostic tag.
        index: The 1-based index being accessed.
        count: Number of valid positions.
    """
    if not 1 <= index <= count:
        raise AddressError(
            f"{kind.capitalize()} {index} out of range 1..{count}",
            _ADDRESS_TAGS[kind],
        )


class AddressableText(ABC):
    """Read-only text addressed by 1-based line, word and character.

    Implementations must keep the four primitives consistent with each
    other: ``char_at`` is defined for every index allowed by
    ``word_count`` and ``char_count``. Out-of-range indices raise
    AddressError.
    """

    @abstractmethod
    def line_count(self) -> int:
        """Return the number of lines."""

    @abstractmethod
    def word_count(self, line: int) -> int:
        """Return the number of words in ``line``."""

    @abstractmethod
    def char_count(self, line: int, word: int) -> int:
        """Return the number of characters in ``word`` of ``line``."""

    @abstractmethod
    def char_at(self, line: int, word: int, char: int) -> int:
        """Return the byte value at ``(line, word, char)``."""

    # Derived helpers, built on the primitives only

    def word_bytes(self, line: int, word: int) -> bytes:
        return bytes(
            self.char_at(line, word, char)
            for char in range(1, self.char_count(line, word) + 1)
        )

    def line_words(self, line: int) -> list[bytes]:
        return [
            self.word_bytes(line, word)
            for word in range(1, self.word_count(line) + 1)
        ]

    def line_bytes(self, line: int) -> bytes:
        """Return ``line`` as its words joined by single spaces."""
        return b" ".join(self.line_words(line))
