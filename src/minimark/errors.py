"""Exception classes for minimark.

The scanner itself never raises for bad input: lexical errors travel as
ERROR tokens. These exceptions are for callers that want to fail loudly
(``minimark.scan(..., strict=True)``) and for invalid configuration.
"""

from __future__ import annotations


class MinimarkError(Exception):
    """Base exception for all minimark errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(MinimarkError):
    """Lexical error reported by the scanner.

    Raised when a strict scan meets an ERROR token.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Scanner name or source file path (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ConfigError(MinimarkError, ValueError):
    """Invalid scanner configuration value."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(f"Invalid '{field_name}': {message}")
