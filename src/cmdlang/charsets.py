"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

The predicates take a single character. The cursor's end-of-input
sentinel (the empty string) belongs to none of the sets.

Usage:
    from cmdlang.charsets import is_whitespace

    if is_whitespace(char):
        ...
"""

WHITESPACE: frozenset[str] = frozenset(" \t\r\n")

COMMENT_CHARS: frozenset[str] = frozenset("#")

BLOCK_CHARS: frozenset[str] = frozenset("()")

QUOTE_CHARS: frozenset[str] = frozenset("'\"")

BLOCK_OPEN = "("
BLOCK_CLOSE = ")"
ESCAPE = "\\"


def is_whitespace(char: str) -> bool:
    """Space, tab, carriage return or newline."""
    return char in WHITESPACE


def is_comment(char: str) -> bool:
    """Comment starter (``#``)."""
    return char in COMMENT_CHARS


def is_block(char: str) -> bool:
    """Block delimiter, ``(`` or ``)``."""
    return char in BLOCK_CHARS


def is_quote(char: str) -> bool:
    return char in QUOTE_CHARS
