"""Exception classes for cmdlang.

Scanning never fails on malformed input; these exceptions only report
misuse of the scanner internals and invalid configuration.
"""

from __future__ import annotations


class CmdlangError(Exception):
    """Base exception for all cmdlang errors.

    Subclass this for specific error categories.
    """

    pass


class PushbackError(CmdlangError):
    """Cursor pushback used without a matching read.

    Raised when ``retreat()`` is called with nothing to undo: before the
    first read, or a second time after a single read.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize pushback error with optional location.

        Args:
            message: Error description
            lineno: Line number of the cursor (1-indexed)
            col_offset: Column of the cursor (1-indexed)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ConfigError(CmdlangError):
    """Invalid scanner configuration value."""

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending ScanConfig field
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
