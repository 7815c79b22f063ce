"""Balanced parentheses parser.

The natural grammar is left-recursive::

    S -> S ( S ) S | ε

Naive descent would call S from S without consuming input and never stop.
It is rewritten so every recursive call follows a consumed ``(``::

    S -> R
    R -> ( S ) R | ε

The trailing R is a tail call, so siblings are read in a loop and only
the S between a pair of parentheses adds a nesting level.

Deciding that R is empty requires reading the next symbol. When that
symbol is ``)`` it belongs to the enclosing ``( S )``, so it is pushed
back for the caller's ``_match_token`` to consume.
"""

from __future__ import annotations

from enum import Enum

from frontlet.parsing.base import RecursiveDescentParser
from frontlet.parsing.lookahead import Lookahead


class ParenTerminal(Enum):
    """Terminals of the balanced parentheses grammar."""

    OPEN = "("
    CLOSE = ")"


class ParenthesesParser(RecursiveDescentParser):
    """Recognizer for balanced, properly nested parentheses.

    The empty string is accepted.

    Usage:
            >>> ParenthesesParser("(()())()").parse()
            >>> ParenthesesParser("(()").parse()
            Traceback (most recent call last):
            ...
            frontlet.errors.UnexpectedTokenError: 1:4 expected ')' at position 3

    """

    __slots__ = ()

    terminals = ParenTerminal

    def _derive(self) -> None:
        while True:
            position = self._lookahead_index
            match self._next_token():
                case ParenTerminal.OPEN:
                    self._descend()
                    self._match_token(ParenTerminal.CLOSE)
                case ParenTerminal.CLOSE:
                    # End of an empty R; the ")" closes the caller's "( S )"
                    self._push_back()
                    return
                case Lookahead.END:
                    return
                case _:
                    raise self._invalid_token(position)
