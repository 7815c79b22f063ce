"""Tests for the prefix expression parser (S -> +SS | -SS | a)."""

import pytest

from frontlet.config import ParseConfig, parse_config_context
from frontlet.errors import (
    FrontletError,
    InvalidTokenError,
    ParseError,
    PrematureEndError,
    TrailingInputError,
)
from frontlet.parsing import PrefixParser, accepts, parse_prefix


class TestAccepted:
    """Valid prefix expressions."""

    @pytest.mark.parametrize(
        "source",
        [
            "a",
            "+aa",
            "-aa",
            "+-aaa",
            "++++aaaaa",
            "+++--+-+-+-+-+++-a-aaaaaaaaaaaaaaaaaa",
        ],
    )
    def test_valid(self, source: str) -> None:
        parser = PrefixParser(source)
        parser.parse()
        assert parser.lookahead_index == len(source)


class TestRejected:
    """Each rejection maps to one error kind with a stable position."""

    @pytest.mark.parametrize(
        "source,position",
        [("+a", 2), ("-a", 2), ("++aa", 4), ("--aa", 4), ("+", 1), ("", 0)],
    )
    def test_premature_end(self, source: str, position: int) -> None:
        with pytest.raises(PrematureEndError) as exc_info:
            parse_prefix(source)
        assert exc_info.value.position == position
        assert exc_info.value.message == f"expected more input at position {position}"

    @pytest.mark.parametrize(
        "source,position,symbol",
        [("b", 0, "b"), ("+ba", 1, "b"), ("+ab", 2, "b"), ("-ab", 2, "b"), ("-ba", 1, "b")],
    )
    def test_invalid_token(self, source: str, position: int, symbol: str) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            parse_prefix(source)
        err = exc_info.value
        assert err.position == position
        assert err.symbol == symbol
        assert err.message == f"invalid token {symbol!r} at position {position}"

    @pytest.mark.parametrize("source,position", [("aa", 1), ("+aaa", 3), ("a+", 1)])
    def test_trailing_input(self, source: str, position: int) -> None:
        with pytest.raises(TrailingInputError) as exc_info:
            parse_prefix(source)
        assert exc_info.value.position == position
        assert "input finished earlier than expected" in exc_info.value.message

    def test_cursor_shows_progress_after_failure(self) -> None:
        parser = PrefixParser("+ab")
        with pytest.raises(ParseError):
            parser.parse()
        assert parser.lookahead_index == 2

    def test_error_message_has_location(self) -> None:
        with pytest.raises(InvalidTokenError, match=r"^1:3 invalid token 'b' at position 2$"):
            parse_prefix("+ab")


class TestParserLifecycle:
    """Parsers are single-use; verdicts are reproducible."""

    def test_parse_twice_raises(self) -> None:
        parser = PrefixParser("a")
        parser.parse()
        with pytest.raises(FrontletError, match="only be called once"):
            parser.parse()

    @pytest.mark.parametrize("source", ["a", "+a", "aa", "+ab"])
    def test_same_verdict_every_time(self, source: str) -> None:
        outcomes = []
        for _ in range(3):
            try:
                PrefixParser(source).parse()
                outcomes.append(None)
            except ParseError as e:
                outcomes.append((type(e), e.position, e.message))
        assert outcomes[0] == outcomes[1] == outcomes[2]

    def test_accepts_helper(self) -> None:
        assert accepts(PrefixParser, "+aa")
        assert not accepts(PrefixParser, "+a")


class TestNestingDepth:
    """Second operands are read in a loop and do not count toward max_depth."""

    @pytest.mark.parametrize("op", ["+", "-"])
    def test_long_right_chain(self, op: str) -> None:
        assert accepts(PrefixParser, f"{op}a" * 1000 + "a")

    def test_right_chain_of_nested_operands(self) -> None:
        assert accepts(PrefixParser, "++aa" * 500 + "a")

    def test_left_chain_counts_depth(self) -> None:
        with parse_config_context(ParseConfig(max_depth=3)):
            assert accepts(PrefixParser, "+a" * 100 + "a")
            assert accepts(PrefixParser, "++aaa")
            assert not accepts(PrefixParser, "+++aaaa")
