"""KWIC - A key-word-in-context indexer built from composable text views."""

from .text import AddressableText
from .errors import (
    StructuralError,
    AddressError,
    AppendOrderError,
    BuilderFinishedError,
)
from .line_store import LineStore, LineStoreBuilder
from .shift import Rotation, ShiftView
from .compare import char_rank, word_less, line_less
from .sorted_view import SortedView, partition_sort
from .reader import read_file, read_stream
from .writer import write_text, format_text

__all__ = [
    'AddressableText',
    'StructuralError',
    'AddressError',
    'AppendOrderError',
    'BuilderFinishedError',
    'LineStore',
    'LineStoreBuilder',
    'Rotation',
    'ShiftView',
    'char_rank',
    'word_less',
    'line_less',
    'SortedView',
    'partition_sort',
    'read_file',
    'read_stream',
    'write_text',
    'format_text',
]
