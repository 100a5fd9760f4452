"""Tests for ContextVar-based scan configuration.

Validates defaults, validation, context manager behavior, thread
isolation, and that scanners pick up the active config.
"""

from threading import Thread

import pytest

from cmdlang import (
    ScanConfig,
    Scanner,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
    tokenize,
)
from cmdlang.errors import ConfigError
from cmdlang.tokens import TokenType


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.continuation_char == ","
        assert config.comments_in_whitespace is True
        assert config.encoding == "utf-8"

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.continuation_char = "+"  # type: ignore[misc]

    @pytest.mark.parametrize("char", ["", "ab", " ", "\n", "#", "(", ")", "'", '"'])
    def test_rejects_bad_continuation_char(self, char: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ScanConfig(continuation_char=char)
        assert exc_info.value.option == "continuation_char"

    def test_rejects_empty_encoding(self) -> None:
        with pytest.raises(ConfigError, match="encoding"):
            ScanConfig(encoding="")


class TestFromDict:
    def test_known_keys(self) -> None:
        config = ScanConfig.from_dict({"continuation_char": "+", "comments_in_whitespace": False})
        assert config.continuation_char == "+"
        assert config.comments_in_whitespace is False

    def test_unknown_keys_ignored(self) -> None:
        config = ScanConfig.from_dict({"unknown_key": 1, "encoding": "latin-1"})
        assert config == ScanConfig(encoding="latin-1")

    def test_empty_dict_is_default(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_get(self) -> None:
        set_scan_config(ScanConfig(continuation_char="+"))
        assert get_scan_config().continuation_char == "+"

    def test_reset_restores_default(self) -> None:
        set_scan_config(ScanConfig(continuation_char="+"))
        reset_scan_config()
        assert get_scan_config().continuation_char == ","


class TestScanConfigContext:
    """Test scan_config_context context manager."""

    def test_context_sets_config(self) -> None:
        with scan_config_context(ScanConfig(continuation_char="+")):
            assert get_scan_config().continuation_char == "+"
        assert get_scan_config().continuation_char == ","

    def test_nested_contexts(self) -> None:
        with scan_config_context(ScanConfig(continuation_char="+")):
            with scan_config_context(ScanConfig(comments_in_whitespace=False)):
                assert get_scan_config().continuation_char == ","
                assert get_scan_config().comments_in_whitespace is False
            assert get_scan_config().continuation_char == "+"
        assert get_scan_config() == ScanConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with scan_config_context(ScanConfig(continuation_char="+")):
                raise ValueError("test")
        assert get_scan_config().continuation_char == ","

    def test_scanner_uses_context_config(self) -> None:
        with scan_config_context(ScanConfig(continuation_char="+")):
            tokens = tokenize("cmd\n+more")
        assert [t.type for t in tokens] == [
            TokenType.IDENT,
            TokenType.WHITESPACE,
            TokenType.IDENT,
            TokenType.EOF,
        ]

    def test_config_captured_at_construction(self) -> None:
        """Leaving the context does not change an existing scanner."""
        with scan_config_context(ScanConfig(continuation_char="+")):
            scanner = Scanner("cmd\n+more")
        assert scanner.config.continuation_char == "+"
        assert [t.type for t in scanner.tokenize()][1] == TokenType.WHITESPACE

    def test_explicit_config_wins(self) -> None:
        with scan_config_context(ScanConfig(continuation_char="+")):
            scanner = Scanner("a", config=ScanConfig())
        assert scanner.config.continuation_char == ","


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, str] = {}

        def worker(thread_id: int, config: ScanConfig) -> None:
            set_scan_config(config)
            results[thread_id] = Scanner("x").config.continuation_char

        threads = [
            Thread(target=worker, args=(0, ScanConfig(continuation_char="+"))),
            Thread(target=worker, args=(1, ScanConfig(continuation_char="&"))),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: "+", 1: "&"}
        assert get_scan_config().continuation_char == ","
