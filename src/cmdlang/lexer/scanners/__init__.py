"""Category scanners for the cmdlang scanner.

Each scanner is a mixin that consumes one lexical category starting at
the cursor (whitespace, comments, literals, block delimiters).
"""

from __future__ import annotations

from cmdlang.lexer.scanners.block import BlockScannerMixin
from cmdlang.lexer.scanners.comment import CommentScannerMixin
from cmdlang.lexer.scanners.literal import LiteralScannerMixin
from cmdlang.lexer.scanners.whitespace import WhitespaceScannerMixin

__all__ = [
    "BlockScannerMixin",
    "CommentScannerMixin",
    "LiteralScannerMixin",
    "WhitespaceScannerMixin",
]
