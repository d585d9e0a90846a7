"""Circular shift view.

Every word of every line of the wrapped text yields one rotated output
line that starts with that word and wraps around to the line's first
word after its last. Nothing is copied: the view only re-addresses
words of the wrapped text.
"""

from dataclasses import dataclass

from .text import AddressableText, check_index


@dataclass(frozen=True)
class Rotation:
    line: int
    start_word: int


class ShiftView(AddressableText):
    """All circular rotations of ``text``, in document order."""

    def __init__(self, text: AddressableText):
        self.text = text
        self.rotations: tuple[Rotation, ...] = tuple(
            Rotation(line, word)
            for line in range(1, text.line_count() + 1)
            for word in range(1, text.word_count(line) + 1)
        )

    def _rotation(self, line: int) -> Rotation:
        check_index("line", line, len(self.rotations))
        return self.rotations[line - 1]

    def _source_word(self, rotation: Rotation, word: int) -> int:
        words = self.text.word_count(rotation.line)
        check_index("word", word, words)
        # word <= words and start_word <= words, so one wrap is enough
        shifted = word + rotation.start_word - 1
        if shifted > words:
            shifted -= words
        return shifted

    def line_count(self) -> int:
        return len(self.rotations)

    def word_count(self, line: int) -> int:
        return self.text.word_count(self._rotation(line).line)

    def char_count(self, line: int, word: int) -> int:
        rotation = self._rotation(line)
        return self.text.char_count(rotation.line, self._source_word(rotation, word))

    def char_at(self, line: int, word: int, char: int) -> int:
        rotation = self._rotation(line)
        return self.text.char_at(
            rotation.line, self._source_word(rotation, word), char
        )
