"""
minimark — pull-based scanner for a minimal markdown-like format

Paragraphs are separated by blank lines; a paragraph starting with one or
more ``#`` is a header. The scanner turns text into HEADER_MARKER and TEXT
tokens, ending with EOF (or ERROR).

Quick Start:
    >>> from minimark import scan
    >>> scan("# Title\n\nBody text")
    [Token(HEADER_MARKER, '#'), Token(TEXT, 'Title'), Token(TEXT, 'Body text'), Token(EOF, '')]

    >>> # Or pull tokens one at a time
    >>> from minimark import lex
    >>> scanner = lex("notes.md", "hello")
    >>> scanner.next_token()
    Token(TEXT, 'hello')
"""

from minimark.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from minimark.errors import ConfigError, LexError, MinimarkError
from minimark.lexer import Scanner, lex
from minimark.location import SourceLocation
from minimark.tokens import Token, TokenType

__version__ = "0.1.0"


def scan(
    source: str,
    *,
    name: str = "<string>",
    config: ScanConfig | None = None,
    strict: bool = False,
) -> list[Token]:
    """Scan source into a list of tokens, terminal token included.

    Args:
        source: Text to scan
        name: Name used in error messages
        config: Scanner configuration (uses the active config if None)
        strict: Raise LexError instead of returning a trailing ERROR token

    Returns:
        All tokens in order; the last one is EOF or ERROR.

    Raises:
        LexError: If strict and the scan ended with an ERROR token.
    """
    scanner = Scanner(name, source, config=config)
    tokens = list(scanner)
    last = tokens[-1]
    if strict and last.type is TokenType.ERROR:
        loc = scanner.location(last.offset)
        raise LexError(
            last.value,
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            source_file=loc.source_file,
        )
    return tokens


__all__ = [
    # Main API
    "scan",
    "lex",
    "Scanner",
    # Tokens
    "Token",
    "TokenType",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "MinimarkError",
    "LexError",
    "ConfigError",
    # Utilities
    "SourceLocation",
    "__version__",
]
