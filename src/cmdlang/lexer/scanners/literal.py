"""Literal scanner mixin.

Two literal forms, both emitted as IDENT:

- Quoted: ``'...'`` or ``"..."``. A backslash makes the next character
  literal, including a backslash or the quote. The closing quote is
  consumed and not part of the value.
- Bare: everything up to whitespace or a block delimiter, which is left
  for the next scan. No escape processing.

Neither form can fail: a quoted literal that is still open at end of
input simply ends there.
"""

from __future__ import annotations

from cmdlang.charsets import ESCAPE, is_block, is_quote, is_whitespace
from cmdlang.lexer.cursor import EOF, Position
from cmdlang.tokens import Token, TokenType
from cmdlang.utils.logger import get_logger

logger = get_logger(__name__)


class LiteralScannerMixin:
    """Mixin providing quoted and bare literal scanning."""

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

    def _scan_literal(self) -> Token:
        start = self._mark()
        char = self._advance()
        if is_quote(char):
            return self._scan_quoted(start, char)
        return self._scan_bare(start, char)

    def _scan_quoted(self, start: Position, quote: str) -> Token:
        """Scan the body of a quoted literal after its opening quote.

        Two states: normal, and escaped (right after a backslash).
        """
        chars: list[str] = []
        escaped = False

        while True:
            char = self._advance()
            if char == EOF:
                logger.debug(
                    "Unterminated %s literal starting at %d:%d",
                    quote,
                    start.line + 1,
                    start.col + 1,
                )
                break
            if escaped:
                chars.append(char)
                escaped = False
            elif char == ESCAPE:
                escaped = True
            elif char == quote:
                break
            else:
                chars.append(char)

        return self._make_token(TokenType.IDENT, "".join(chars), start)

    def _scan_bare(self, start: Position, first: str) -> Token:
        chars = [first]

        char = self._advance()
        while char != EOF and not is_whitespace(char) and not is_block(char):
            chars.append(char)
            char = self._advance()
        self._retreat()

        return self._make_token(TokenType.IDENT, "".join(chars), start)
