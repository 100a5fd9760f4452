"""ContextVar-based scan configuration for cmdlang.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Scanner created without an explicit config picks up the active one.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from cmdlang.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(comments_in_whitespace=False)):
        tokens = tokenize(source)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from cmdlang.charsets import is_block, is_comment, is_quote, is_whitespace
from cmdlang.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scanner configuration.

    Attributes:
        continuation_char: Character that, as the first non-whitespace
            character after a newline, joins the next line to the
            current command
        comments_in_whitespace: Scan comments inside whitespace runs so
            they do not interrupt line continuation. When False a comment
            ends the run and is returned by the next scan() call.
        encoding: Encoding used to decode bytes sources

    """

    continuation_char: str = ","
    comments_in_whitespace: bool = True
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        char = self.continuation_char
        if not isinstance(char, str) or len(char) != 1:
            raise ConfigError("continuation_char", f"expected a single character, got {char!r}")
        if is_whitespace(char) or is_comment(char) or is_block(char) or is_quote(char):
            raise ConfigError(
                "continuation_char", f"{char!r} already has a meaning in the command language"
            )
        if not self.encoding:
            raise ConfigError("encoding", "must not be empty")

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "continuation_char": "+",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.continuation_char
            '+'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(continuation_char="+")):
        ...     scanner = Scanner("cmd\\n+more")
        >>> # Automatically reset to previous config

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
