"""Prefix expression parser.

Grammar::

    S -> + S S | - S S | a

Right-recursive, so it is recognized by plain single-symbol lookahead
without any rewriting. The second operand is in tail position and is read
by the same loop, so only first operands add a nesting level.
"""

from __future__ import annotations

from enum import Enum

from frontlet.errors import PrematureEndError
from frontlet.parsing.base import RecursiveDescentParser
from frontlet.parsing.lookahead import Lookahead


class PrefixTerminal(Enum):
    """Terminals of the prefix expression grammar."""

    A = "a"
    PLUS = "+"
    MINUS = "-"


class PrefixParser(RecursiveDescentParser):
    """Recognizer for prefix expressions over binary ``+``/``-`` and leaf ``a``.

    Usage:
            >>> PrefixParser("+-aaa").parse()
            >>> PrefixParser("+a").parse()
            Traceback (most recent call last):
            ...
            frontlet.errors.PrematureEndError: 1:3 expected more input at position 2

    """

    __slots__ = ()

    terminals = PrefixTerminal

    def _derive(self) -> None:
        while True:
            position = self._lookahead_index
            match self._next_token():
                case PrefixTerminal.A:
                    return
                case PrefixTerminal.PLUS | PrefixTerminal.MINUS:
                    # First operand; the loop then reads the second
                    self._descend()
                case Lookahead.END:
                    raise PrematureEndError(position, self._location_at(position))
                case _:
                    raise self._invalid_token(position)
