"""Sorted view: the lines of a text in alphabetical order.

The view owns a permutation of line indices and sorts it once, in
place, with a partition sort. Line content in the wrapped text is never
moved or copied.
"""

import logging
from typing import Callable

from .compare import line_less
from .text import AddressableText, check_index

logger = logging.getLogger(__name__)


def partition_sort(items: list, less: Callable[[object, object], bool]) -> None:
    """Sort ``items`` in place.

    The leftmost element of each range is the pivot. Every element less
    than the pivot is rotated to just before it, then both sides are
    sorted the same way. Ranges wait on an explicit stack, so deep
    partitions do not recurse. Input that is already sorted hits the
    quadratic worst case. Equal elements end up in no particular order.
    """
    # Half-open [left, right) ranges still to sort
    pending = [(0, len(items))]
    while pending:
        left, right = pending.pop()
        if right - left <= 1:
            continue
        pivot = left
        # Invariant: items[left:pivot] are all less than items[pivot]
        for i in range(pivot + 1, right):
            if less(items[i], items[pivot]):
                if i == pivot + 1:
                    items[pivot], items[i] = items[i], items[pivot]
                else:
                    items[pivot], items[pivot + 1], items[i] = (
                        items[i], items[pivot], items[pivot + 1])
                pivot += 1
        pending.append((pivot + 1, right))
        pending.append((left, pivot))


class SortedView(AddressableText):
    """The lines of ``text`` ordered by ``line_less``."""

    def __init__(self, text: AddressableText):
        self.text = text
        perm = list(range(1, text.line_count() + 1))
        partition_sort(perm, lambda a, b: line_less(text, a, b))
        self._perm = tuple(perm)
        logger.debug("Sorted %d lines", len(perm))

    @property
    def permutation(self) -> tuple[int, ...]:
        """Underlying line index for each output line, in output order."""
        return self._perm

    def _source_line(self, line: int) -> int:
        check_index("line", line, len(self._perm))
        return self._perm[line - 1]

    def line_count(self) -> int:
        return self.text.line_count()

    def word_count(self, line: int) -> int:
        return self.text.word_count(self._source_line(line))

    def char_count(self, line: int, word: int) -> int:
        return self.text.char_count(self._source_line(line), word)

    def char_at(self, line: int, word: int, char: int) -> int:
        return self.text.char_at(self._source_line(line), word, char)
