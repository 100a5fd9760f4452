"""Hand-written scanner for the cmdlang command language.

Reads one character of lookahead, pushes it back, and hands the cursor
to the scanner for that character's category. Scanning never fails:
malformed input degrades to literal or comment tokens.

Thread Safety:
Scanner instances are single-use. Create one per source.
All state is instance-local and unsynchronized; do not share an
instance between threads.

"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import IO

from cmdlang.charsets import is_block, is_comment, is_whitespace
from cmdlang.config import ScanConfig, get_scan_config
from cmdlang.lexer.cursor import EOF, Cursor, Position
from cmdlang.lexer.scanners import (
    BlockScannerMixin,
    CommentScannerMixin,
    LiteralScannerMixin,
    WhitespaceScannerMixin,
)
from cmdlang.tokens import EOF_LITERAL, Token, TokenType
from cmdlang.utils.logger import get_logger

logger = get_logger(__name__)

Source = str | bytes | IO[str] | IO[bytes]


class Scanner(
    # Single-category scanners
    CommentScannerMixin,
    LiteralScannerMixin,
    BlockScannerMixin,
    # Whitespace runs (delegate to the comment scanner, so listed last)
    WhitespaceScannerMixin,
):
    """Scanner producing one token per scan() call.

    Usage:
            >>> scanner = Scanner("run (fast)")
            >>> for token in scanner.tokenize():
            ...     print(token)
        Token(IDENT, 'run', 1:1)
        Token(WHITESPACE, ' ', 1:4)
        Token(BLOCK_START, '(', 1:5)
        Token(IDENT, 'fast', 1:6)
        Token(BLOCK_END, ')', 1:10)
        Token(EOF, '\\x00', 1:11)

    Thread Safety:
        Scanner instances are single-use. Create one per source.

    """

    __slots__ = (
        "_cursor",
        "_config",
        "_source_file",
        "_pending",  # Tokens already scanned, returned before reading on
    )

    def __init__(
        self,
        source: Source,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with a source.

        Args:
            source: Source text, bytes, or a readable text/binary stream.
                Streams are read but not closed.
            source_file: Optional source file path for token locations
            config: Scan options; defaults to the active context config
        """
        self._config = config if config is not None else get_scan_config()
        self._source_file = source_file
        self._cursor = Cursor(_read_source(source, self._config.encoding))
        self._pending: deque[Token] = deque()

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def pending(self) -> tuple[Token, ...]:
        """Tokens queued by the last whitespace run, oldest first."""
        return tuple(self._pending)

    def scan(self) -> Token:
        """Return the next token.

        Past the end of input every call returns the same EOF token.
        """
        if self._pending:
            return self._pending.popleft()

        char = self._advance()
        if char == EOF:
            return self._make_eof_token()
        self._retreat()

        if is_whitespace(char):
            return self._scan_whitespace()
        if is_comment(char):
            return self._scan_comment()
        if is_block(char):
            return self._scan_block()
        return self._scan_literal()

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token."""
        while True:
            token = self.scan()
            yield token
            if token.type is TokenType.EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    # =========================================================================
    # Cursor access for the scanner mixins
    # =========================================================================

    def _advance(self) -> str:
        return self._cursor.advance()

    def _retreat(self) -> None:
        self._cursor.retreat()

    def _mark(self) -> Position:
        return self._cursor.position

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start: Position,
        end: Position | None = None,
    ) -> Token:
        """Create a Token spanning start to end (default: cursor position).

        Start line/column are reported 1-indexed. The end column is the
        0-indexed column after the token, i.e. the 1-indexed column of
        its last character.
        """
        if end is None:
            end = self._cursor.position
        return Token(
            type=token_type,
            value=value,
            _lineno=start.line + 1,
            _col=start.col + 1,
            _start_offset=start.offset,
            _end_offset=end.offset,
            _end_lineno=end.line + 1,
            _end_col=end.col,
            _source_file=self._source_file,
        )

    def _make_eof_token(self) -> Token:
        here = self._cursor.position
        return self._make_token(TokenType.EOF, EOF_LITERAL, here, here)


def _read_source(source: Source, encoding: str) -> str:
    """Materialize a source into text."""
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode(encoding)
    data = source.read()
    if isinstance(data, bytes):
        return data.decode(encoding)
    return data
