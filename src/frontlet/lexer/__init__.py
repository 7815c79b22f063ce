"""Modular maximal-munch lexer for Frontlet.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, SymbolTable, tokenize
├── core.py              # Lexer class (mixin composition + navigation)
├── symbols.py           # Keyword/identifier interning table
└── scanners/            # One mixin per lexical rule family
    ├── comment.py       # // and /* */ comments
    ├── number.py        # Decimal literals
    ├── word.py          # Identifiers and keywords
    └── operator.py      # Relational operators

Usage:
    >>> from frontlet.lexer import tokenize
    >>> [token.lexeme for token in tokenize("a<=b /* c */ 3.0")]
    ['a', '<=', 'b', '3.0']

"""

from frontlet.lexer.core import Lexer, tokenize
from frontlet.lexer.symbols import KEYWORDS, SymbolTable

__all__ = ["KEYWORDS", "Lexer", "SymbolTable", "tokenize"]
