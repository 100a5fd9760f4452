"""Source location tracking for tokens and diagnostics.

Provides SourceLocation dataclass for tracking positions in source text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a token.

    Start line and column are 1-indexed, offsets are 0-indexed character
    offsets into the source. The end column is the 1-indexed column of the
    last character covered (0 when the span ends right after a newline).

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source (exclusive)
        end_lineno: Ending line number
        end_col_offset: Ending column offset
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=1)
            >>> str(loc)
        '1:1'

            >>> loc = SourceLocation(3, 5, source_file="deploy.cmd")
            >>> str(loc)
        'deploy.cmd:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for messages.

        Returns:
            Formatted string like "file.cmd:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end.

        Args:
            end: Ending location

        Returns:
            New SourceLocation with this start and end's end positions
        """
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset if end.end_col_offset is not None else end.col_offset,
            source_file=self.source_file,
        )
