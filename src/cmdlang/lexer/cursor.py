"""Reversible character cursor with line/column tracking.

The cursor reads one character at a time and can undo the most recent
read. Undoing a newline cannot recompute the previous column, so the
position before every consumed newline is pushed onto a history stack
and restored verbatim on retreat.

Thread Safety:
Cursor instances are single-use and not synchronized.

"""

from __future__ import annotations

from dataclasses import dataclass

from cmdlang.errors import PushbackError

# Returned by Cursor.advance() once the source is exhausted
EOF = ""


@dataclass(frozen=True, slots=True)
class Position:
    """Snapshot of the cursor. All fields are 0-indexed.

    Attributes:
        line: Line number
        col: Column, number of characters read on this line
        offset: Absolute character offset into the source

    """

    line: int = 0
    col: int = 0
    offset: int = 0


class Cursor:
    """Sequential reader over a source string with single-step pushback.

    Usage:
            >>> cursor = Cursor("a\\nb")
            >>> cursor.advance(), cursor.advance()
        ('a', '\\n')
            >>> cursor.position
        Position(line=1, col=0, offset=2)
            >>> cursor.retreat()
            >>> cursor.position
        Position(line=0, col=1, offset=1)

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_line",
        "_col",
        "_offset",
        "_history",  # Positions before each consumed newline
        "_last",  # Last character read; None when there is nothing to undo
    )

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._line = 0
        self._col = 0
        self._offset = 0
        self._history: list[Position] = []
        self._last: str | None = None

    @property
    def position(self) -> Position:
        return Position(self._line, self._col, self._offset)

    @property
    def at_eof(self) -> bool:
        return self._offset >= self._source_len

    @property
    def depth(self) -> int:
        """Number of saved newline positions."""
        return len(self._history)

    def advance(self) -> str:
        """Read the next character.

        Returns:
            The character, or EOF when the source is exhausted. Reading
            past the end does not move the position.
        """
        if self._offset >= self._source_len:
            self._last = EOF
            return EOF

        char = self._source[self._offset]
        if char == "\n":
            self._history.append(Position(self._line, self._col, self._offset))
            self._line += 1
            self._col = 0
        else:
            self._col += 1
        self._offset += 1
        self._last = char
        return char

    def retreat(self) -> None:
        """Undo the most recent advance().

        Undoing an EOF read is a no-op since nothing was consumed.

        Raises:
            PushbackError: If there is no read to undo.
        """
        last = self._last
        if last is None:
            raise PushbackError(
                "retreat() without a preceding advance()",
                lineno=self._line + 1,
                col_offset=self._col + 1,
            )
        self._last = None

        if last == EOF:
            return
        if last == "\n":
            saved = self._history.pop()
            self._line = saved.line
            self._col = saved.col
            self._offset = saved.offset
        else:
            self._col -= 1
            self._offset -= 1
