"""Error types for the KWIC index.

Two disjoint kinds of failure exist. Structural errors are contract
violations by a caller (bad addressing, out-of-order appends) and are
never caught or retried. I/O failures are ordinary ``OSError``s that
propagate to the command line boundary.
"""


class StructuralError(Exception):
    """A caller broke a structural contract.

    Attributes:
        tag: Short diagnostic tag identifying the violated check.
    """

    def __init__(self, message: str, tag: str):
        super().__init__(f"{message} ({tag})")
        self.tag = tag


class AddressError(StructuralError, IndexError):
    """A line, word or character index is out of range."""


class AppendOrderError(StructuralError):
    """An append did not address the position right after current content."""


class BuilderFinishedError(StructuralError):
    """An append was attempted on a builder that has already been finished."""
