"""Single-symbol lookahead for recursive-descent parsers.

Provides the mixin every grammar in the parser family is built on:
classify the symbol under the cursor, consume it if it is a terminal of
the grammar, push back the one symbol just consumed, and require a
specific terminal.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar

from frontlet.errors import InvalidTokenError, NestingTooDeepError, UnexpectedTokenError

if TYPE_CHECKING:
    from frontlet.location import SourceLocation


class Lookahead(Enum):
    """Lookahead results that are not terminals of any grammar.

    END is reported at end of input, INVALID for a symbol the grammar does
    not know. Neither consumes input.
    """

    END = auto()
    INVALID = auto()


class LookaheadMixin:
    """Mixin providing cursor movement over a symbol sequence.

    Required Host Attributes:
        - terminals: Enum class whose values are the grammar's symbols
        - _symbols: Sequence[str]
        - _lookahead_index: int
        - _last_consumed: int | None
        - _depth: int
        - _max_depth: int

    The cursor only moves forward, except for ``_push_back`` which un-reads
    the single symbol consumed by the immediately preceding ``_next_token``.

    """

    terminals: ClassVar[type[Enum]]

    _symbols: Sequence[str]
    _lookahead_index: int
    _last_consumed: int | None
    _depth: int
    _max_depth: int

    def _location_at(self, position: int) -> SourceLocation | None:
        """Source location of the symbol at position. Implemented by parser."""
        raise NotImplementedError

    def _next_token(self) -> Enum:
        """Read the symbol under the cursor.

        Returns:
            The grammar terminal (consumed), Lookahead.END at end of input,
            or Lookahead.INVALID for an unknown symbol (not consumed).
        """
        index = self._lookahead_index
        if index >= len(self._symbols):
            return Lookahead.END

        try:
            terminal = self.terminals(self._symbols[index])
        except ValueError:
            return Lookahead.INVALID

        self._last_consumed = index
        self._lookahead_index = index + 1
        return terminal

    def _push_back(self) -> None:
        """Return the symbol consumed by the last ``_next_token`` to the input.

        Used when reading a token was the only way to discover that the
        current derivation is empty and the token belongs to the caller.
        """
        assert self._last_consumed is not None, "push back without a consumed token"
        assert self._last_consumed == self._lookahead_index - 1, "push back must follow a read"
        self._lookahead_index = self._last_consumed
        self._last_consumed = None

    def _match_token(self, expected: Enum) -> None:
        """Consume one token, requiring it to be expected.

        Raises:
            UnexpectedTokenError: If the next token is anything else.
        """
        position = self._lookahead_index
        if self._next_token() is not expected:
            raise UnexpectedTokenError(repr(expected.value), position, self._location_at(position))

    def _invalid_token(self, position: int) -> InvalidTokenError:
        """Build the error for an unknown symbol at position."""
        return InvalidTokenError(self._symbols[position], position, self._location_at(position))

    @contextmanager
    def _nested(self) -> Iterator[None]:
        """Track one level of recursion, bounded by the configured max depth.

        Raises:
            NestingTooDeepError: If the depth limit is exceeded.
        """
        self._depth += 1
        try:
            if self._depth > self._max_depth:
                position = self._lookahead_index
                raise NestingTooDeepError(self._max_depth, position, self._location_at(position))
            yield
        finally:
            self._depth -= 1
