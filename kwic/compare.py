"""Alphabetic ordering of words and lines.

Letters order alphabetically ignoring case, with each uppercase letter
immediately before its lowercase form::

    A < a < B < b < ... < Z < z

Every other byte (space, digits, punctuation, control and high bytes)
ranks 0, below all letters and equal to each other. That folding is
coarse: "a1" and "a." compare equal. It is kept as is.
"""

from .text import AddressableText


def char_rank(char: int) -> int:
    """Return the sort rank of a byte value."""
    if 0x41 <= char <= 0x5A:  # A-Z
        return (char - 0x41) * 2 + 1
    if 0x61 <= char <= 0x7A:  # a-z
        return (char - 0x61) * 2 + 2
    return 0


def word_less(text: AddressableText, line1: int, word1: int,
              line2: int, word2: int) -> bool:
    """Return True if word1 of line1 sorts strictly before word2 of line2.

    Characters compare by rank; a word that is a strict rank-prefix of
    the other is less.
    """
    chars1 = text.char_count(line1, word1)
    chars2 = text.char_count(line2, word2)
    for char in range(1, min(chars1, chars2) + 1):
        rank1 = char_rank(text.char_at(line1, word1, char))
        rank2 = char_rank(text.char_at(line2, word2, char))
        if rank1 != rank2:
            return rank1 < rank2
    return chars1 < chars2


def line_less(text: AddressableText, line1: int, line2: int) -> bool:
    """Return True if line1 sorts strictly before line2.

    The first word position where the lines differ decides. If one line
    runs out of words first while all compared words are equal, the
    shorter line is less. Equal lines are not less than each other.
    """
    words1 = text.word_count(line1)
    words2 = text.word_count(line2)
    for word in range(1, min(words1, words2) + 1):
        if word_less(text, line1, word, line2, word):
            return True
        if word_less(text, line2, word, line1, word):
            return False
    return words1 < words2


def rank_key(text: AddressableText, line: int) -> tuple[tuple[int, ...], ...]:
    """Return a key whose tuple ordering matches ``line_less``."""
    return tuple(
        tuple(
            char_rank(text.char_at(line, word, char))
            for char in range(1, text.char_count(line, word) + 1)
        )
        for word in range(1, text.word_count(line) + 1)
    )
