"""Tests for character ranks and word/line ordering."""

import itertools
import string

import pytest

from kwic.compare import char_rank, line_less, rank_key, word_less
from conftest import make_store


def test_rank_interleaves_cases():
    assert char_rank(ord("A")) < char_rank(ord("a"))
    assert char_rank(ord("a")) < char_rank(ord("B"))
    assert char_rank(ord("B")) < char_rank(ord("b"))
    assert char_rank(ord("Z")) < char_rank(ord("z"))


def test_rank_full_alphabet_order():
    """Ranks of AaBb...Zz are strictly increasing."""
    letters = [c for pair in zip(string.ascii_uppercase, string.ascii_lowercase)
               for c in pair]
    ranks = [char_rank(ord(c)) for c in letters]
    assert ranks == sorted(ranks)
    assert len(set(ranks)) == 52


@pytest.mark.parametrize("char", [" ", "5", "0", ".", "-", "@", "[", "`", "{", "~"])
def test_non_letters_rank_zero(char):
    assert char_rank(ord(char)) == 0


def test_non_letters_rank_below_letters():
    assert char_rank(ord(" ")) < char_rank(ord("A"))


def test_high_and_control_bytes_rank_zero():
    assert char_rank(0x00) == 0
    assert char_rank(0xC1) == 0
    assert char_rank(0xFF) == 0


class TestWordLess:
    """Word ordering by character rank."""

    def setup_method(self):
        self.store = make_store("cat Cat ca cats dog a1 a. Apple apple b")

    def less(self, w1, w2):
        return word_less(self.store, 1, w1, 1, w2)

    def test_alphabetical(self):
        assert self.less(1, 5)  # cat < dog
        assert not self.less(5, 1)

    def test_uppercase_before_lowercase(self):
        assert self.less(2, 1)  # Cat < cat
        assert not self.less(1, 2)

    def test_case_insensitive_primary(self):
        assert self.less(9, 10)  # apple < b
        assert self.less(8, 10)  # Apple < b
        assert self.less(8, 9)   # Apple < apple

    def test_prefix_is_less(self):
        assert self.less(3, 1)  # ca < cat
        assert self.less(1, 4)  # cat < cats
        assert not self.less(4, 1)

    def test_irreflexive(self):
        for word in range(1, 11):
            assert not self.less(word, word)

    def test_non_letters_compare_equal(self):
        assert not self.less(6, 7)  # a1 vs a.
        assert not self.less(7, 6)

    def test_across_lines(self):
        store = make_store("zebra", "apple")
        assert word_less(store, 2, 1, 1, 1)
        assert not word_less(store, 1, 1, 2, 1)


def test_line_less_first_difference_decides():
    store = make_store("a cat ran", "a cat sat", "a dog")
    assert line_less(store, 1, 2)
    assert line_less(store, 2, 3)
    assert not line_less(store, 3, 1)


def test_line_less_shorter_prefix_line_is_less():
    store = make_store("a cat", "a cat ran")
    assert line_less(store, 1, 2)
    assert not line_less(store, 2, 1)


def test_line_less_empty_line_is_least():
    store = make_store("", "a")
    assert line_less(store, 1, 2)
    assert not line_less(store, 2, 1)


def test_equal_lines_are_incomparable():
    store = make_store("the cat", "the cat", "the ca.")
    assert not line_less(store, 1, 2)
    assert not line_less(store, 2, 1)
    assert not line_less(store, 1, 1)


LINES = [
    "", "a", "A", "a cat", "a cat ran", "A cat", "cat", "Cat sat",
    "cat sat the", "ran a cat", "sat the cat", "the cat sat", "b", "B b",
    "a1", "a.", "zz top", "zz", "z z",
]


def test_line_less_is_a_strict_order():
    """Irreflexive, asymmetric and transitive over a mixed sample."""
    store = make_store(*LINES)
    n = store.line_count()
    less = {(a, b): line_less(store, a, b)
            for a in range(1, n + 1) for b in range(1, n + 1)}
    for a in range(1, n + 1):
        assert not less[a, a]
    for a, b in itertools.permutations(range(1, n + 1), 2):
        assert not (less[a, b] and less[b, a])
    for a, b, c in itertools.permutations(range(1, n + 1), 3):
        if less[a, b] and less[b, c]:
            assert less[a, c]


def test_rank_key_matches_line_less():
    store = make_store(*LINES)
    n = store.line_count()
    for a, b in itertools.permutations(range(1, n + 1), 2):
        assert line_less(store, a, b) == (rank_key(store, a) < rank_key(store, b))
