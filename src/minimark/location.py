"""Source location tracking for error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position in source text, 1-indexed.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset in characters (1-indexed)
        offset: Absolute position in the source string
        source_file: Scanner name or file path (optional)

    Examples:
            >>> SourceLocation.from_offset("ab\\ncd", 4, "notes.md")
        SourceLocation(lineno=2, col_offset=2, offset=4, source_file='notes.md')
            >>> str(SourceLocation(2, 2, 4, "notes.md"))
            'notes.md:2:2'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls, source: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute line and column for an offset into source.

        Offsets past the end are clamped to the end of source.
        """
        offset = max(0, min(offset, len(source)))
        segment = source[:offset]
        lineno = segment.count("\n") + 1
        last_nl = segment.rfind("\n")
        return cls(
            lineno=lineno,
            col_offset=offset - last_nl,
            offset=offset,
            source_file=source_file,
        )
