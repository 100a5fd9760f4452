"""Comment scanner mixin.

Comment forms:

- ``#( ... )#`` block comment, may span lines -> COMMENT_BLOCK
- ``# ...`` line comment, ends after the next newline (included in the
  value) or at end of input -> COMMENT_LINE

A block comment still open at end of input is returned as COMMENT_LINE.
"""

from __future__ import annotations

from cmdlang.charsets import BLOCK_CLOSE, BLOCK_OPEN, is_comment
from cmdlang.lexer.cursor import EOF, Position
from cmdlang.tokens import Token, TokenType
from cmdlang.utils.logger import get_logger

logger = get_logger(__name__)


class CommentScannerMixin:
    """Mixin providing line and block comment scanning."""

    def _advance(self) -> str:
        """Read one character. Implemented by Scanner."""
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
        start = self._mark()
        chars = [self._advance()]

        char = self._advance()
        if char == BLOCK_OPEN:
            chars.append(char)
            return self._scan_block_comment(start, chars)

        while char != EOF:
            chars.append(char)
            if char == "\n":
                break
            char = self._advance()

        return self._make_token(TokenType.COMMENT_LINE, "".join(chars), start)

    def _scan_block_comment(self, start: Position, chars: list[str]) -> Token:
        last = ""
        char = self._advance()
        while char != EOF:
            chars.append(char)
            if is_comment(char) and last == BLOCK_CLOSE:
                return self._make_token(TokenType.COMMENT_BLOCK, "".join(chars), start)
            last = char
            char = self._advance()

        logger.debug("Unterminated block comment starting at %d:%d", start.line + 1, start.col + 1)
        return self._make_token(TokenType.COMMENT_LINE, "".join(chars), start)
