"""Token and TokenType definitions for the minimark scanner.

The scanner produces a flat stream of Token objects for a downstream parser.
Each Token has a type, a string value, and the offset where it starts.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the scanner."""

    # Terminal tokens
    ERROR = auto()  # Value is a message, not input text
    EOF = auto()

    # Content
    HEADER_MARKER = auto()  # #, ##, ...
    TEXT = auto()  # Paragraph or header text


TERMINAL_TYPES = frozenset({TokenType.EOF, TokenType.ERROR})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        value: The exact source span for content tokens, the message for ERROR,
            and the empty string for EOF
        offset: Start position in source (cursor position for EOF and ERROR).
            Not part of equality: tokens compare by type and value.

    """

    type: TokenType
    value: str
    offset: int = field(default=-1, compare=False)

    @property
    def is_terminal(self) -> bool:
        """True for EOF and ERROR, after which the scanner produces nothing new."""
        return self.type in TERMINAL_TYPES

    def __str__(self) -> str:
        if self.type is TokenType.EOF:
            return "EOF"
        if self.type is TokenType.ERROR:
            return self.value
        if len(self.value) > 80:
            return f"{self.value[:10]!r}..."
        return repr(self.value)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r})"
