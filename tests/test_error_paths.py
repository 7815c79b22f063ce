"""Error construction and formatting tests.

Tests that exercise the exception hierarchy and message formatting
shared by the lexer and every parser.
"""

import pytest

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
from frontlet.location import SourceLocation

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.position is None
        assert err.location is None

    def test_with_location(self) -> None:
        err = ParseError("bad syntax", 4, SourceLocation(lineno=2, col_offset=3))
        assert str(err) == "2:3 bad syntax"
        assert err.message == "bad syntax"

    def test_with_source_file(self) -> None:
        loc = SourceLocation(lineno=1, col_offset=1, source_file="expr.txt")
        err = ParseError("error", 0, loc)
        assert str(err) == "expr.txt:1:1 error"

    def test_unknown_location_is_not_printed(self) -> None:
        err = ParseError("error", 0, SourceLocation.unknown())
        assert str(err) == "error"


# =========================================================================
# Hierarchy
# =========================================================================


class TestHierarchy:
    """Every parser failure is a ParseError; lexer failures are LexErrors."""

    @pytest.mark.parametrize(
        "err",
        [
            InvalidTokenError("x", 0),
            UnexpectedTokenError("')'", 1),
            PrematureEndError(2),
            TrailingInputError(3),
            NestingTooDeepError(10, 11),
        ],
    )
    def test_parse_errors(self, err: ParseError) -> None:
        assert isinstance(err, ParseError)
        assert isinstance(err, FrontletError)
        assert err.position is not None

    def test_unterminated_comment_is_lex_error(self) -> None:
        err = UnterminatedCommentError(SourceLocation(lineno=1, col_offset=5))
        assert isinstance(err, LexError)
        assert isinstance(err, FrontletError)
        assert not isinstance(err, ParseError)
        assert str(err) == "1:5 unterminated block comment"


class TestMessages:
    """Message text for each error kind."""

    def test_invalid_token(self) -> None:
        assert InvalidTokenError("b", 2).message == "invalid token 'b' at position 2"

    def test_unexpected_token(self) -> None:
        assert UnexpectedTokenError("'1'", 3).message == "expected '1' at position 3"

    def test_premature_end(self) -> None:
        assert PrematureEndError(1).message == "expected more input at position 1"

    def test_trailing_input(self) -> None:
        assert TrailingInputError(1).message == (
            "input finished earlier than expected at position 1"
        )

    def test_nesting_too_deep(self) -> None:
        err = NestingTooDeepError(5, 5)
        assert err.depth == 5
        assert err.message == "nesting deeper than 5 levels at position 5"
