import pytest

from kwic.line_store import LineStore


def make_store(*lines):
    """Build a LineStore from space-separated str lines."""
    return LineStore.from_lines(
        [word.encode() for word in line.split()] for line in lines
    )


@pytest.fixture
def example_store():
    return make_store("the cat sat", "a cat ran")
