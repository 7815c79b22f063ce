"""Numeric literal scanning mixin."""

from frontlet.location import SourceLocation
from frontlet.tokens import Number

DIGITS = frozenset("0123456789")


class NumberScannerMixin:
    """Mixin scanning non-negative decimal literals.

    A number starts at a digit, or at a ``.`` immediately followed by a
    digit. Digits accumulate into the integer part until a single ``.``
    switches to the fractional part; a second ``.`` ends the literal and is
    left for the next token.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _col: int

    def _peek(self, offset: int = 0) -> str:
        """Peek at a character. Implemented by Lexer."""
        raise NotImplementedError

    def _location(self) -> SourceLocation:
        """Location spanning the saved start to the current position."""
        raise NotImplementedError

    def _scan_number(self) -> Number | None:
        """Scan a number at the current position.

        Returns:
            Number token, or None if no number starts here. Nothing is
            consumed when None is returned.
        """
        char = self._peek()
        if char not in DIGITS and not (char == "." and self._peek(1) in DIGITS):
            return None

        source = self._source
        start = self._pos
        pos = start
        integer = 0
        fraction = 0
        in_fraction = False

        while pos < self._source_len:
            char = source[pos]
            if char in DIGITS:
                if in_fraction:
                    fraction = fraction * 10 + int(char)
                else:
                    integer = integer * 10 + int(char)
            elif char == "." and not in_fraction:
                in_fraction = True
            else:
                break
            pos += 1

        # Digits and dots never span lines
        self._col += pos - start
        self._pos = pos
        return Number(integer, fraction, source[start:pos], self._location())
