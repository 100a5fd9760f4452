"""Token and TokenType definitions for the cmdlang scanner.

The scanner produces a stream of Token objects, one per scan() call.
Each Token has a type, value, and source coordinates.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdlang.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the scanner.

    Organized by category:
    - Literals (IDENT: bare words and quoted strings)
    - Structure (WHITESPACE, EOF, EOC, BLOCK_START, BLOCK_END)
    - Comments (COMMENT_BLOCK, COMMENT_LINE)

    ILLEGAL is reserved; no scanning path produces it.

    """

    ILLEGAL = auto()

    # Literals
    IDENT = auto()  # word, 'quoted', "quoted"

    # Structure
    WHITESPACE = auto()
    EOF = auto()
    EOC = auto()  # newline ending a command
    BLOCK_START = auto()  # (
    BLOCK_END = auto()  # )

    # Comments
    COMMENT_BLOCK = auto()  # #( ... )#
    COMMENT_LINE = auto()  # # ... \n

    def __str__(self) -> str:
        return _DISPLAY_NAMES.get(self, "unk")

    @property
    def is_literal(self) -> bool:
        return self in _LITERAL_TYPES

    @property
    def is_special(self) -> bool:
        return self in _SPECIAL_TYPES

    @property
    def is_comment(self) -> bool:
        return self in _COMMENT_TYPES


_LITERAL_TYPES = frozenset({TokenType.IDENT})

_SPECIAL_TYPES = frozenset(
    {
        TokenType.WHITESPACE,
        TokenType.EOF,
        TokenType.EOC,
        TokenType.BLOCK_START,
        TokenType.BLOCK_END,
    }
)

_COMMENT_TYPES = frozenset({TokenType.COMMENT_BLOCK, TokenType.COMMENT_LINE})

_DISPLAY_NAMES: dict[TokenType, str] = {
    TokenType.ILLEGAL: "ILLEGAL",
    TokenType.IDENT: "IDENT",
    TokenType.WHITESPACE: "WHITESPACE",
    TokenType.EOF: "EOF",
    TokenType.EOC: "EOC",
    TokenType.COMMENT_BLOCK: "COMMENT_BLOCK",
    TokenType.COMMENT_LINE: "COMMENT_LINE",
    TokenType.BLOCK_START: "BLOCK_START",
    TokenType.BLOCK_END: "BLOCK_END",
}

# Value carried by the EOF token
EOF_LITERAL = "\x00"


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        value: Token text. For quoted literals this is the unescaped
            content without the surrounding quotes.
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _end_lineno: Line number after the last character
        _end_col: Column of the last character (1-indexed); 0 when the
            token ends with a newline
        _source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    _end_lineno: int
    _end_col: int
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached).

        Returns:
            SourceLocation object for this token.
        """
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from cmdlang.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    def describe(self) -> str:
        """Render the one-line dump used by the command line tool.

        Example:
            >>> tok = Token(TokenType.IDENT, "cmd", 1, 1, 0, 3, 1, 3)
            >>> tok.describe()
            "Line: 1 - 1 Col: 1 - 3 Pos: 0 - 3 IDENT 'cmd'"
        """
        return (
            f"Line: {self._lineno} - {self._end_lineno}"
            f" Col: {self._col} - {self._end_col}"
            f" Pos: {self._start_offset} - {self._end_offset}"
            f" {self.type} {self.value!r}"
        )

    @property
    def literal(self) -> bytes:
        """Token value as UTF-8 bytes."""
        return self.value.encode("utf-8")

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def offset(self) -> int:
        return self._start_offset

    @property
    def end_lineno(self) -> int:
        return self._end_lineno

    @property
    def end_col(self) -> int:
        return self._end_col

    @property
    def end_offset(self) -> int:
        return self._end_offset
