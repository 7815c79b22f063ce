"""Parser for strings of n zeros followed by n ones.

Grammar::

    S -> 0 S 1 | 0 1

Recognized with the same pushback technique as the parentheses grammar:
a ``1`` read where a nested S could start marks the end of that S and is
returned to the input for the caller to match.
"""

from __future__ import annotations

from enum import Enum

from frontlet.errors import PrematureEndError
from frontlet.parsing.base import RecursiveDescentParser
from frontlet.parsing.lookahead import Lookahead


class ZeroOneTerminal(Enum):
    """Terminals of the 0^n 1^n grammar."""

    ZERO = "0"
    ONE = "1"


class ZeroOneParser(RecursiveDescentParser):
    """Recognizer for ``0^n 1^n`` with n >= 1.

    Usage:
            >>> ZeroOneParser("000111").parse()
            >>> ZeroOneParser("001").parse()
            Traceback (most recent call last):
            ...
            frontlet.errors.UnexpectedTokenError: 1:4 expected '1' at position 3

    """

    __slots__ = ()

    terminals = ZeroOneTerminal

    def _parse_start(self) -> None:
        if not self._symbols:
            raise PrematureEndError(0, self._location_at(0))
        super()._parse_start()

    def _derive(self) -> None:
        position = self._lookahead_index
        match self._next_token():
            case ZeroOneTerminal.ZERO:
                self._descend()
                self._match_token(ZeroOneTerminal.ONE)
            case ZeroOneTerminal.ONE:
                # Innermost "0 1": the nested S is empty
                self._push_back()
            case Lookahead.END:
                return
            case _:
                raise self._invalid_token(position)
