"""Recursive-descent parser family.

Each parser recognizes one small grammar with a single symbol of
lookahead and raises a ParseError subclass on rejection.

Architecture:
parsing/
├── lookahead.py         # LookaheadMixin: next token, push back, match
├── base.py              # RecursiveDescentParser, accepts()
├── prefix.py            # S -> +SS | -SS | a
├── parens.py            # S -> (S)S | ε
└── zero_one.py          # S -> 0S1 | 01

"""

from __future__ import annotations

from collections.abc import Sequence

from frontlet.parsing.base import RecursiveDescentParser, accepts
from frontlet.parsing.lookahead import Lookahead, LookaheadMixin
from frontlet.parsing.parens import ParenTerminal, ParenthesesParser
from frontlet.parsing.prefix import PrefixParser, PrefixTerminal
from frontlet.parsing.zero_one import ZeroOneParser, ZeroOneTerminal
from frontlet.tokens import Token


def parse_prefix(source: str | Sequence[Token], source_file: str | None = None) -> None:
    """Recognize a prefix expression, raising ParseError on rejection."""
    PrefixParser(source, source_file).parse()


def parse_parens(source: str | Sequence[Token], source_file: str | None = None) -> None:
    """Recognize balanced parentheses, raising ParseError on rejection."""
    ParenthesesParser(source, source_file).parse()


def parse_zero_one(source: str | Sequence[Token], source_file: str | None = None) -> None:
    """Recognize ``0^n 1^n`` (n >= 1), raising ParseError on rejection."""
    ZeroOneParser(source, source_file).parse()


__all__ = [
    "Lookahead",
    "LookaheadMixin",
    "ParenTerminal",
    "ParenthesesParser",
    "PrefixParser",
    "PrefixTerminal",
    "RecursiveDescentParser",
    "ZeroOneParser",
    "ZeroOneTerminal",
    "accepts",
    "parse_parens",
    "parse_prefix",
    "parse_zero_one",
]
