"""Source location tracking for tokens and diagnostics.

Provides SourceLocation dataclass for tracking positions in source text.
Used by the lexer to stamp tokens and by parsers to position errors.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Line and column are 1-indexed; offsets are 0-indexed positions in the
    source string (end_offset is exclusive).

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=4, offset=3, end_offset=5)
            >>> str(loc)
            '1:4'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "expr.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def at_offset(
        cls, source: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute the location of a character offset within source.

        Offsets past the end of source are clamped to the end position.
        """
        offset = min(offset, len(source))
        lineno = source.count("\n", 0, offset) + 1
        col_offset = offset - (source.rfind("\n", 0, offset) + 1) + 1
        return cls(
            lineno=lineno,
            col_offset=col_offset,
            offset=offset,
            end_offset=min(offset + 1, len(source)),
            source_file=source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for tokens created synthetically or when location is unavailable.
        """
        return cls(lineno=0, col_offset=0)
