"""State-machine scanner for the minimark text format.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, lex
├── core.py              # Scanner class (mixin composition, cursor, emission)
├── modes.py             # StateFn alias, EOF_CHAR sentinel
└── scanners/            # State function mixins
    ├── block.py         # Line start and paragraph text
    └── header.py        # Header marker and header text

Usage:
    >>> from minimark.lexer import lex
    >>> scanner = lex("notes", "par one\n\n# header")
    >>> scanner.next_token()
    Token(TEXT, 'par one')

"""

from __future__ import annotations

from minimark.config import ScanConfig
from minimark.lexer.core import Scanner


def lex(name: str, source: str, *, config: ScanConfig | None = None) -> Scanner:
    """Create a Scanner for source. No scanning happens until a token is requested."""
    return Scanner(name, source, config=config)


__all__ = ["Scanner", "lex"]
