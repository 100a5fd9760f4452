"""Tests ensuring scanner state is consistent after tokenization.

These tests verify that the scanner leaves no queued tokens behind and
that the cursor history tracks exactly the newlines consumed.
"""

from __future__ import annotations

from cmdlang.lexer import Position, Scanner


class TestPendingQueueState:
    """Verify the pending queue is drained."""

    def test_queue_empty_after_tokenize(self) -> None:
        scanner = Scanner("a # one\n# two\n,b")
        list(scanner.tokenize())
        assert scanner.pending == ()

    def test_queue_empty_at_eof(self) -> None:
        scanner = Scanner("a #x\n")
        tokens = list(scanner.tokenize())
        assert tokens[-1].type.name == "EOF"
        assert scanner.pending == ()


class TestCursorState:
    """Verify the cursor ends at the end of the source."""

    def test_cursor_at_end(self) -> None:
        source = "cmd 'x'\n\t,(y) #( z )#\n"
        scanner = Scanner(source)
        list(scanner.tokenize())
        assert scanner._cursor.at_eof
        assert scanner._cursor.position == Position(line=2, col=0, offset=len(source))

    def test_history_holds_one_entry_per_newline(self) -> None:
        """Pushbacks across newlines leave no stale history entries."""
        source = "a\nb\n\tc\n,d\n"
        scanner = Scanner(source)
        list(scanner.tokenize())
        assert scanner._cursor.depth == source.count("\n")
