# ===== SECTION: IMPORTS =====
from typing import Optional, TextIO

from ..errors import SQLReadError


# ===== SECTION: CURSOR =====

class CharCursor:
    """
    Pull-based reader over a text stream, one character at a time.

    Keeps a single character of lookahead so that two-character markers
    (`--`, `/*`, `*/`) can be recognized without backtracking. Read failures
    other than end of stream are raised as SQLReadError.
    """

    def __init__(self, stream: TextIO, name: str = None):
        self._stream = stream
        self._name = name
        self._pending: Optional[str] = None
        self._eof = False

    def _read(self) -> Optional[str]:
        if self._eof:
            return None
        try:
            char = self._stream.read(1)
        except (OSError, ValueError) as e:
            # ValueError covers UnicodeDecodeError and reads on a closed stream
            raise SQLReadError("read", e, self._name) from e
        if not char:
            self._eof = True
            return None
        return char

    def next(self) -> Optional[str]:
        """Return the next character, or None at end of stream."""
        if self._pending is not None:
            char, self._pending = self._pending, None
            return char
        return self._read()

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it."""
        if self._pending is None:
            self._pending = self._read()
        return self._pending

