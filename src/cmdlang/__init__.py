"""
cmdlang: scanner for a small line-oriented command language

Commands are words and quoted literals separated by whitespace, one
command per line. Parentheses group sub commands, ``#`` starts a line
comment, ``#( ... )#`` is a block comment, and a line starting with a
comma continues the previous command::

    someaction
        ,(depends on sub action)
        ,(and this sub action)

Quick Start:
    >>> from cmdlang import tokenize
    >>> [str(t.type) for t in tokenize("say 'hi there'")]
    ['IDENT', 'WHITESPACE', 'IDENT', 'EOF']

    >>> # Or drive the scanner one token at a time
    >>> from cmdlang import Scanner, TokenType
    >>> scanner = Scanner("cmd\\nnext")
    >>> scanner.scan().value
    'cmd'
    >>> scanner.scan().type is TokenType.EOC
    True
"""

from __future__ import annotations

from cmdlang.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from cmdlang.errors import CmdlangError, ConfigError, PushbackError
from cmdlang.lexer import Cursor, Position, Scanner
from cmdlang.lexer.core import Source
from cmdlang.location import SourceLocation
from cmdlang.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: Source,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Scan a whole source.

    Args:
        source: Source text, bytes, or a readable stream
        source_file: Optional source file path for token locations
        config: Scan options; defaults to the active context config

    Returns:
        All tokens, ending with the EOF token
    """
    return list(Scanner(source, source_file=source_file, config=config).tokenize())


__all__ = [
    "CmdlangError",
    "ConfigError",
    "Cursor",
    "Position",
    "PushbackError",
    "ScanConfig",
    "Scanner",
    "SourceLocation",
    "Token",
    "TokenType",
    "__version__",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "tokenize",
]
