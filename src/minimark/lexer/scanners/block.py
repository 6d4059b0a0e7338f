"""Paragraph boundary and plain text states."""

from __future__ import annotations

from minimark.config import ScanConfig
from minimark.lexer.modes import EOF_CHAR, StateFn
from minimark.tokens import TokenType


class BlockScannerMixin:
    """Mixin providing the line-start and plain text states.

    Paragraph text runs until the paragraph separator or end of input.
    A single newline does not end a paragraph.

    """

    # These will be set by the Scanner class
    _source: str
    _start: int
    _pos: int
    _config: ScanConfig

    def _next(self) -> str:
        raise NotImplementedError

    def _has_prefix(self, prefix: str) -> bool:
        raise NotImplementedError

    def _ignore(self) -> None:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> None:
        raise NotImplementedError

    # Provided by HeaderScannerMixin
    def _lex_header_marker(self) -> StateFn | None:
        raise NotImplementedError

    def _lex_at_line_start(self) -> StateFn | None:
        """Skip blank lines, then pick header or paragraph scanning."""
        while self._has_prefix("\n"):
            self._pos += 1
            self._ignore()
        if self._has_prefix(self._config.header_sigil):
            return self._lex_header_marker
        return self._lex_plain_text

    def _lex_plain_text(self) -> StateFn | None:
        """Accumulate paragraph text up to the separator or end of input.

        The separator is consumed without being emitted.
        """
        separator = self._config.paragraph_separator
        while True:
            if self._has_prefix(separator):
                if self._pos > self._start:
                    self._emit(TokenType.TEXT)
                self._pos += len(separator)
                self._ignore()
                return self._lex_at_line_start
            if self._next() == EOF_CHAR:
                break

        if self._pos > self._start:
            self._emit(TokenType.TEXT)
        self._emit(TokenType.EOF)
        return None
