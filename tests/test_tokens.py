"""Tests for token variants and the symbol table."""

from dataclasses import FrozenInstanceError

import pytest

from frontlet.lexer import KEYWORDS, SymbolTable
from frontlet.location import SourceLocation
from frontlet.tokens import (
    Number,
    RelationalKind,
    RelationalOperator,
    Token,
    Unknown,
    Word,
    WordKind,
)


class TestTokenEquality:
    """Tokens compare by lexical content, never by location."""

    def test_location_ignored(self) -> None:
        here = SourceLocation(lineno=1, col_offset=1)
        there = SourceLocation(lineno=9, col_offset=4, offset=80, end_offset=81)
        assert Unknown("?", here) == Unknown("?", there)

    def test_number_lexeme_ignored(self) -> None:
        assert Number(0, 5, ".05") == Number(0, 5, ".5")

    def test_kind_distinguishes_words(self) -> None:
        assert Word(WordKind.TRUE, "true") != Word(WordKind.IDENTIFIER, "true")

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            Unknown("?").char = "!"  # type: ignore[misc]


class TestTokenAlias:
    """Token is the closed union of the four variants."""

    @pytest.mark.parametrize(
        "token",
        [
            Word(WordKind.IDENTIFIER, "x"),
            Number(1),
            RelationalOperator(RelationalKind.LESS, "<"),
            Unknown("#"),
        ],
    )
    def test_isinstance(self, token: Token) -> None:
        assert isinstance(token, Token)
        assert token.lexeme


class TestSymbolTable:
    """Keyword seeding and identifier interning."""

    def test_seeded_with_keywords(self) -> None:
        table = SymbolTable()
        assert len(table) == len(KEYWORDS)
        assert table.lookup("true") == Word(WordKind.TRUE, "true")
        assert table.lookup("false") == Word(WordKind.FALSE, "false")

    def test_lookup_does_not_insert(self) -> None:
        table = SymbolTable()
        assert table.lookup("name") is None
        assert "name" not in table

    def test_intern_caches_identifier(self) -> None:
        table = SymbolTable()
        first = table.intern("name")
        assert first.kind is WordKind.IDENTIFIER
        assert table.intern("name") is first
        assert len(table) == len(KEYWORDS) + 1

    def test_keywords_win(self) -> None:
        assert SymbolTable().intern("false").kind is WordKind.FALSE
