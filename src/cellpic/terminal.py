import os
import sys
from typing import TextIO

DEFAULT_SIZE = (80, 24)


def get_terminal_size(stream: TextIO | None = None) -> tuple[int, int]:
    """Return (columns, rows) of the terminal behind ``stream`` (stdout by default).

    Falls back to 80x24 when the stream is not a tty.
    """
    stream = sys.stdout if stream is None else stream
    if not stream.isatty():
        return DEFAULT_SIZE
    try:
        size = os.get_terminal_size(stream.fileno())
    except OSError:
        return DEFAULT_SIZE
    return (size.columns, size.lines)
