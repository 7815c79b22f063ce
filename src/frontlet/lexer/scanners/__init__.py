"""Rule-specific scanners for the Frontlet lexer.

Each scanner is a mixin that recognizes one family of lexical rules
(comments, numbers, words, relational operators). The Lexer tries them
in a fixed order; the first that applies wins.
"""

from __future__ import annotations

from frontlet.lexer.scanners.comment import CommentScannerMixin
from frontlet.lexer.scanners.number import NumberScannerMixin
from frontlet.lexer.scanners.operator import (
    RELATIONAL_OPERATORS,
    OperatorScannerMixin,
)
from frontlet.lexer.scanners.word import WordScannerMixin

__all__ = [
    "RELATIONAL_OPERATORS",
    "CommentScannerMixin",
    "NumberScannerMixin",
    "OperatorScannerMixin",
    "WordScannerMixin",
]
