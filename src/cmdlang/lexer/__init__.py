"""Hand-written scanner for the cmdlang command language.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, Cursor, Position
├── core.py              # Scanner class (mixin composition + dispatch)
├── cursor.py            # Cursor with newline-aware pushback
└── scanners/            # Category scanners
    ├── whitespace.py    # Whitespace, EOC and line continuation
    ├── comment.py       # # line and #( block )# comments
    ├── literal.py       # Bare and quoted literals
    └── block.py         # ( and )

Usage:
    >>> from cmdlang.lexer import Scanner
    >>> scanner = Scanner("cmd\\nnext")
    >>> for token in scanner.tokenize():
    ...     print(token)
Token(IDENT, 'cmd', 1:1)
Token(EOC, '\\n', 1:4)
Token(IDENT, 'next', 2:1)
Token(EOF, '\\x00', 2:5)

"""

from cmdlang.lexer.core import Scanner
from cmdlang.lexer.cursor import EOF, Cursor, Position

__all__ = ["EOF", "Cursor", "Position", "Scanner"]
