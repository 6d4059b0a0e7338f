"""Header marker and header text states."""

from __future__ import annotations

from minimark.config import ScanConfig
from minimark.lexer.modes import EOF_CHAR, StateFn
from minimark.tokens import TokenType


class HeaderScannerMixin:
    """Mixin providing header scanning.

    A header is a run of sigils at a paragraph boundary followed by text up
    to the end of the line. Whitespace between the two is dropped.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _start: int
    _pos: int
    _config: ScanConfig

    def _next(self) -> str:
        raise NotImplementedError

    def _backup(self) -> None:
        raise NotImplementedError

    def _has_prefix(self, prefix: str) -> bool:
        raise NotImplementedError

    def _ignore(self) -> None:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> None:
        raise NotImplementedError

    def _errorf(self, fmt: str, *args: object) -> None:
        raise NotImplementedError

    def _lex_header_marker(self) -> StateFn | None:
        """Emit the run of sigils as one HEADER_MARKER token."""
        sigil = self._config.header_sigil
        level = 0
        while self._has_prefix(sigil):
            self._pos += len(sigil)
            level += 1

        limit = self._config.max_header_level
        if limit is not None and level > limit:
            return self._errorf("header level %d exceeds maximum of %d", level, limit)

        self._emit(TokenType.HEADER_MARKER)
        return self._lex_header_text

    def _lex_header_text(self) -> StateFn | None:
        """Emit the rest of the header line, without its newline."""
        whitespace = self._config.header_whitespace
        char = self._next()
        while char != EOF_CHAR and char in whitespace:
            self._ignore()
            char = self._next()
        self._backup()

        line_end = self._source.find("\n", self._pos)
        self._pos = line_end if line_end != -1 else self._source_len
        if self._pos > self._start:
            self._emit(TokenType.TEXT)
        return self._lex_at_line_start

    # Provided by BlockScannerMixin
    _lex_at_line_start: StateFn
