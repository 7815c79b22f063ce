"""Exception classes for Frontlet.

Provides standardized exceptions for error handling throughout Frontlet.

The lexer never fails on ordinary input: unrecognized characters become
``Unknown`` tokens. Only opt-in strict checks raise ``LexError``. Every
parser rejection is a ``ParseError`` subclass and is terminal for that
``parse()`` call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from frontlet.location import SourceLocation


class FrontletError(Exception):
    """Base exception for all Frontlet errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(FrontletError):
    """Input rejected by a recursive-descent parser.

    Attributes:
        message: Error description without location prefix
        position: Lookahead index where recognition stopped. A character
            offset for text input, a token index for token input.
        location: Source location of the offending symbol, when known
    """

    def __init__(
        self,
        message: str,
        position: int | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize parse error with optional position and location.

        Args:
            message: Error description
            position: Cursor position of the offending symbol
            location: Source location for the formatted message
        """
        self.message = message
        self.position = position
        self.location = location

        prefix = f"{location} " if location is not None and location.lineno else ""
        super().__init__(f"{prefix}{message}")


class InvalidTokenError(ParseError):
    """A symbol matched no grammar alternative at the current position."""

    def __init__(
        self,
        symbol: str,
        position: int,
        location: SourceLocation | None = None,
    ) -> None:
        self.symbol = symbol
        super().__init__(f"invalid token {symbol!r} at position {position}", position, location)


class UnexpectedTokenError(ParseError):
    """A specific required token (a closing delimiter) was not found."""

    def __init__(
        self,
        expected: str,
        position: int,
        location: SourceLocation | None = None,
    ) -> None:
        self.expected = expected
        super().__init__(f"expected {expected} at position {position}", position, location)


class PrematureEndError(ParseError):
    """Input ran out while a subderivation was still required."""

    def __init__(self, position: int, location: SourceLocation | None = None) -> None:
        super().__init__(f"expected more input at position {position}", position, location)


class TrailingInputError(ParseError):
    """The parse succeeded without consuming the whole input."""

    def __init__(self, position: int, location: SourceLocation | None = None) -> None:
        super().__init__(
            f"input finished earlier than expected at position {position}",
            position,
            location,
        )


class NestingTooDeepError(ParseError):
    """Recursion exceeded the configured maximum nesting depth."""

    def __init__(
        self,
        depth: int,
        position: int,
        location: SourceLocation | None = None,
    ) -> None:
        self.depth = depth
        super().__init__(
            f"nesting deeper than {depth} levels at position {position}",
            position,
            location,
        )


class LexError(FrontletError):
    """Error during scanning. Only raised by opt-in strict checks."""

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        self.message = message
        self.location = location

        prefix = f"{location} " if location is not None and location.lineno else ""
        super().__init__(f"{prefix}{message}")


class UnterminatedCommentError(LexError):
    """A ``/*`` block comment reached end of input without ``*/``."""

    def __init__(self, location: SourceLocation) -> None:
        super().__init__("unterminated block comment", location)
