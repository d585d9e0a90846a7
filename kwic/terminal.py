"""Terminal diagnostics using Blessed."""

import sys
from typing import Optional, TextIO

import blessed


def report_error(message: str, stream: Optional[TextIO] = None) -> None:
    """Print an error message to stderr (or ``stream``).

    The message is shown in bold red on a terminal; on pipes and files
    Blessed leaves it as plain text.
    """
    stream = stream or sys.stderr
    term = blessed.Terminal(stream=stream)
    print(term.bold_red(message), file=stream)
