"""State function mixins for the Scanner."""

from minimark.lexer.scanners.block import BlockScannerMixin
from minimark.lexer.scanners.header import HeaderScannerMixin

__all__ = [
    "BlockScannerMixin",
    "HeaderScannerMixin",
]
