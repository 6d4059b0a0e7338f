"""Pull-based state-machine scanner.

Tokens are produced on demand: each call to next_token() runs state
functions only until a token is available. The current state is stored as
a bound method and swapped by its own return value; None is terminal.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from minimark.config import ScanConfig, get_scan_config
from minimark.errors import MinimarkError
from minimark.lexer.modes import EOF_CHAR, MAX_EMIT_PER_STATE, StateFn
from minimark.lexer.scanners import BlockScannerMixin, HeaderScannerMixin
from minimark.location import SourceLocation
from minimark.tokens import Token, TokenType
from minimark.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    # Header states come first so their methods win over the block mixin's stubs
    HeaderScannerMixin,
    BlockScannerMixin,
):
    """State-machine scanner for paragraphs and single-level headers.

    Usage:
            >>> scanner = Scanner("example", "# Hello\n\nWorld")
            >>> for token in scanner:
            ...     print(repr(token))
        Token(HEADER_MARKER, '#')
        Token(TEXT, 'Hello')
        Token(TEXT, 'World')
        Token(EOF, '')

    Once EOF or ERROR has been returned, next_token() keeps returning that
    same token.

    """

    __slots__ = (
        "_name",
        "_source",
        "_source_len",  # Cached len(source)
        "_config",
        "_state",
        "_start",
        "_pos",
        "_width",  # Width of last character read, 0 after EOF or backup
        "_pending",  # Emitted but not yet delivered tokens (FIFO)
        "_terminal",
    )

    def __init__(
        self,
        name: str,
        source: str,
        *,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            name: Used only in error messages and logs
            source: Full text to scan
            config: Scanner configuration; defaults to the active ScanConfig
        """
        self._name = name
        self._source = source
        self._source_len = len(source)
        self._config = config if config is not None else get_scan_config()
        self._state: StateFn | None = self._lex_at_line_start
        self._start = 0
        self._pos = 0
        self._width = 0
        self._pending: deque[Token] = deque()
        self._terminal: Token | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def done(self) -> bool:
        """True once the terminal token (EOF or ERROR) has been delivered."""
        return self._terminal is not None

    def next_token(self) -> Token:
        """Return the next token, running states until one is available."""
        if self._terminal is not None:
            return self._terminal

        while not self._pending:
            if self._state is None:
                raise MinimarkError(
                    f"scanner {self._name!r} stopped without a terminal token"
                )
            self._state = self._state()
            if len(self._pending) > MAX_EMIT_PER_STATE:
                raise MinimarkError(
                    f"scanner {self._name!r} emitted {len(self._pending)} tokens "
                    f"in one state (limit {MAX_EMIT_PER_STATE})"
                )

        token = self._pending.popleft()
        if token.is_terminal:
            self._terminal = token
            logger.debug("%s: scan finished with %s", self._name, token.type.name)
        return token

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens lazily, up to and including the terminal token."""
        while True:
            token = self.next_token()
            yield token
            if token.is_terminal:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def location(self, offset: int) -> SourceLocation:
        """Line and column of an offset into the source."""
        return SourceLocation.from_offset(self._source, offset, self._name)

    # =========================================================================
    # Cursor primitives
    # =========================================================================

    def _next(self) -> str:
        """Consume and return the next character, or EOF_CHAR at end of input."""
        if self._pos >= self._source_len:
            self._width = 0
            return EOF_CHAR
        char = self._source[self._pos]
        self._width = len(char)
        self._pos += self._width
        return char

    def _peek(self) -> str:
        """Return the next character without consuming it."""
        if self._pos >= self._source_len:
            return EOF_CHAR
        return self._source[self._pos]

    def _backup(self) -> None:
        """Step back over the last character read. Only valid once per _next()."""
        self._pos -= self._width
        self._width = 0

    def _has_prefix(self, prefix: str) -> bool:
        return self._source.startswith(prefix, self._pos)

    # =========================================================================
    # Emission
    # =========================================================================

    def _emit(self, token_type: TokenType) -> None:
        """Buffer the pending span as a token and start a new lexeme."""
        self._pending.append(
            Token(token_type, self._source[self._start : self._pos], self._start)
        )
        self._start = self._pos

    def _ignore(self) -> None:
        """Drop the pending span without emitting it."""
        self._start = self._pos

    def _errorf(self, fmt: str, *args: object) -> None:
        """Buffer an ERROR token and return None to stop the scan."""
        message = fmt % args if args else fmt
        logger.debug("%s: %s", self.location(self._start), message)
        self._pending.append(Token(TokenType.ERROR, message, self._start))
        return None
