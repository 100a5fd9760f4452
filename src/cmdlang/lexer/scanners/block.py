"""Block delimiter scanner mixin."""

from __future__ import annotations

from cmdlang.charsets import BLOCK_OPEN
from cmdlang.lexer.cursor import Position
from cmdlang.tokens import Token, TokenType


class BlockScannerMixin:
    """Mixin providing the single-character ( and ) tokens."""

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

    def _scan_block(self) -> Token:
        start = self._mark()
        char = self._advance()
        token_type = TokenType.BLOCK_START if char == BLOCK_OPEN else TokenType.BLOCK_END
        return self._make_token(token_type, char, start)
