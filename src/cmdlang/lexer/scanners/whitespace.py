"""Whitespace and line continuation scanner mixin.

A newline ends the current command unless the first non-whitespace
character after it is the continuation character (``,`` by default)::

    someaction
        ,(depends on sub action)

Here the newline, the indentation and the comma form one WHITESPACE
token and no EOC is emitted. Without the comma the newline becomes an
EOC token.

Comments met inside a whitespace run are scanned in place, so they do
not break continuation. One run can therefore yield several tokens; the
extra tokens go to the scanner's pending queue and are returned by the
following scan() calls, in source order and with contiguous spans:

- whitespace between comments -> WHITESPACE
- the segment holding the last unabsorbed newline, up to and including
  that newline -> EOC, and what follows it on the next line -> WHITESPACE

Only newlines read as whitespace count. The newline closing a line
comment belongs to the comment, so ``x # c\\ny`` has no EOC and a comma
after it is plain text. A run that reaches end of input ends no command.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cmdlang.charsets import is_comment, is_whitespace
from cmdlang.lexer.cursor import EOF, Position
from cmdlang.tokens import Token, TokenType

if TYPE_CHECKING:
    from cmdlang.config import ScanConfig


@dataclass(frozen=True, slots=True)
class _Segment:
    """Whitespace collected between two comments of one run."""

    start: Position
    end: Position
    text: str


class WhitespaceScannerMixin:
    """Mixin providing whitespace, EOC and continuation scanning."""

    # These will be set by the Scanner class
    _config: ScanConfig
    _pending: deque[Token]

    def _advance(self) -> str:
        """Read one character. Implemented by Scanner."""
        raise NotImplementedError

    def _retreat(self) -> None:
        """Undo the last read. Implemented by Scanner."""
        raise NotImplementedError

    def _mark(self) -> Position:
        """Current cursor position. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start: Position,
        end: Position | None = None,
    ) -> Token:
        """Create token from cursor positions. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_comment(self) -> Token:
        """Scan a comment. Implemented by CommentScannerMixin."""
        raise NotImplementedError

    def _scan_whitespace(self) -> Token:
        """Scan a whitespace run and return its first token.

        Remaining tokens of the run are queued on self._pending.
        """
        continuation = self._config.continuation_char
        embedded_comments = self._config.comments_in_whitespace

        run_start = self._mark()
        items: list[Token | _Segment] = []
        segment_start = run_start
        chars: list[str] = []
        # Position right after the newline that will end the command
        boundary: Position | None = None

        while True:
            char = self._advance()

            if is_whitespace(char):
                chars.append(char)
                if char == "\n":
                    boundary = self._mark()
                continue

            if char == continuation and boundary is not None:
                chars.append(char)
                boundary = None
                continue

            if embedded_comments and is_comment(char):
                self._retreat()
                if chars:
                    items.append(_Segment(segment_start, self._mark(), "".join(chars)))
                    chars = []
                items.append(self._scan_comment())
                segment_start = self._mark()
                continue

            # Command text or end of input, leave it for the next scan
            self._retreat()
            if char == EOF:
                boundary = None
            break

        if chars:
            items.append(_Segment(segment_start, self._mark(), "".join(chars)))

        tokens = self._tokens_for_run(items, boundary)
        if not tokens:
            tokens = [self._make_token(TokenType.WHITESPACE, "", run_start, run_start)]

        self._pending.extend(tokens)
        return self._pending.popleft()

    def _tokens_for_run(
        self, items: list[Token | _Segment], boundary: Position | None
    ) -> list[Token]:
        tokens: list[Token] = []
        for item in items:
            if isinstance(item, Token):
                tokens.append(item)
                continue

            if boundary is not None and item.start.offset < boundary.offset <= item.end.offset:
                split = boundary.offset - item.start.offset
                tokens.append(
                    self._make_token(TokenType.EOC, item.text[:split], item.start, boundary)
                )
                if split < len(item.text):
                    tokens.append(
                        self._make_token(
                            TokenType.WHITESPACE, item.text[split:], boundary, item.end
                        )
                    )
            else:
                tokens.append(
                    self._make_token(TokenType.WHITESPACE, item.text, item.start, item.end)
                )
        return tokens
