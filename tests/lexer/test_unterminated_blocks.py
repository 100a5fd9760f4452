"""Test unterminated constructs at EOF - ensures content isn't silently lost.

The scanner never raises on malformed input. Open quotes end at end of
input and open block comments come back as line comments.
"""

import logging

import pytest

from cmdlang import tokenize
from cmdlang.tokens import TokenType


class TestUnterminatedQuotes:
    """Quoted literals still open at end of input."""

    @pytest.mark.parametrize("quote", ["'", '"'])
    def test_open_quote_runs_to_end(self, quote: str) -> None:
        source = f"say {quote}content without closing"
        tokens = tokenize(source)

        literal = tokens[2]
        assert literal.type == TokenType.IDENT
        assert literal.value == "content without closing"
        assert literal.end_offset == len(source)
        assert tokens[-1].type == TokenType.EOF

    def test_open_quote_swallows_newlines(self) -> None:
        tokens = tokenize("'line 1\nline 2")
        assert [t.type for t in tokens] == [TokenType.IDENT, TokenType.EOF]
        assert tokens[0].value == "line 1\nline 2"

    def test_trailing_backslash_dropped(self) -> None:
        assert tokenize("'ab\\")[0].value == "ab"

    def test_lone_quote(self) -> None:
        tokens = tokenize('"')
        assert (tokens[0].type, tokens[0].value) == (TokenType.IDENT, "")
        assert tokens[0].end_offset == 1

    def test_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="cmdlang"):
            tokenize("'open")
        assert any("Unterminated" in r.getMessage() for r in caplog.records)


class TestUnterminatedBlockComments:
    """Block comments still open at end of input."""

    @pytest.mark.parametrize(
        "source",
        ["#(", "#( open", "#(\nline 2\nline 3", "#( almost )", "#( ) #"],
    )
    def test_degrades_to_line_comment(self, source: str) -> None:
        tokens = tokenize(source)
        assert [t.type for t in tokens] == [TokenType.COMMENT_LINE, TokenType.EOF]
        assert tokens[0].value == source

    def test_inside_whitespace_run(self) -> None:
        tokens = tokenize("a #( open\n")
        assert [t.type for t in tokens] == [
            TokenType.IDENT,
            TokenType.WHITESPACE,
            TokenType.COMMENT_LINE,
            TokenType.EOF,
        ]

    def test_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="cmdlang"):
            tokenize("#( open")
        assert any("block comment" in r.getMessage() for r in caplog.records)
