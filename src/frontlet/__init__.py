"""
Frontlet: a small compiler front-end library

A hand-written maximal-munch lexer for a tiny expression language, and a
family of single-lookahead recursive-descent parsers for toy grammars.
Zero runtime dependencies.

Quick Start:
    >>> from frontlet import tokenize
    >>> tokenize("x >= .5")
    [Word(kind=<WordKind.IDENTIFIER: 1>, text='x'), RelationalOperator(kind=<RelationalKind.GREATER_OR_EQUAL: 6>, text='>='), Number(integer=0, fraction=5)]

    >>> from frontlet import parse_parens
    >>> parse_parens("(())()")

    >>> # Parsers also run over lexer output
    >>> from frontlet import PrefixParser
    >>> PrefixParser(tokenize("+ a - a a")).parse()
"""

from frontlet.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from frontlet.errors import (
    FrontletError,
    InvalidTokenError,
    LexError,
    NestingTooDeepError,
    ParseError,
    PrematureEndError,
    TrailingInputError,
    UnexpectedTokenError,
    UnterminatedCommentError,
)
from frontlet.lexer import KEYWORDS, Lexer, SymbolTable, tokenize
from frontlet.location import SourceLocation
from frontlet.parsing import (
    ParenthesesParser,
    PrefixParser,
    RecursiveDescentParser,
    ZeroOneParser,
    accepts,
    parse_parens,
    parse_prefix,
    parse_zero_one,
)
from frontlet.tokens import (
    Number,
    RelationalKind,
    RelationalOperator,
    Token,
    Unknown,
    Word,
    WordKind,
)

__version__ = "0.1.0"

__all__ = [
    # Lexing
    "KEYWORDS",
    "Lexer",
    "SymbolTable",
    "tokenize",
    # Tokens
    "Number",
    "RelationalKind",
    "RelationalOperator",
    "Token",
    "Unknown",
    "Word",
    "WordKind",
    # Parsing
    "ParenthesesParser",
    "PrefixParser",
    "RecursiveDescentParser",
    "ZeroOneParser",
    "accepts",
    "parse_parens",
    "parse_prefix",
    "parse_zero_one",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "FrontletError",
    "InvalidTokenError",
    "LexError",
    "NestingTooDeepError",
    "ParseError",
    "PrematureEndError",
    "TrailingInputError",
    "UnexpectedTokenError",
    "UnterminatedCommentError",
    # Locations
    "SourceLocation",
    "__version__",
]
