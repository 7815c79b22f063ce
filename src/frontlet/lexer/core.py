"""Maximal-munch lexer for a tiny expression language.

Scans identifiers, true/false keywords, decimal numbers, relational
operators and comments. Every other non-whitespace character becomes an
Unknown token, so scanning never fails on ordinary input.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from frontlet.config import get_parse_config
from frontlet.errors import FrontletError
from frontlet.lexer.scanners import (
    CommentScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
    WordScannerMixin,
)
from frontlet.lexer.symbols import SymbolTable
from frontlet.location import SourceLocation
from frontlet.tokens import Token, Unknown
from frontlet.utils.logger import get_logger

logger = get_logger(__name__)

WHITESPACE = frozenset(" \t\n")


class Lexer(
    CommentScannerMixin,
    NumberScannerMixin,
    WordScannerMixin,
    OperatorScannerMixin,
):
    """Maximal-munch lexer with single-use scan state.

    Rules are tried in a fixed order at each position and the first that
    applies wins: whitespace, comments, numbers, words, relational
    operators, then a one-character Unknown fallback.

    Usage:
            >>> lexer = Lexer("x >= 2.5 // limit")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Word(kind=<WordKind.IDENTIFIER: 1>, text='x')
        RelationalOperator(kind=<RelationalKind.GREATER_OR_EQUAL: 6>, text='>=')
        Number(integer=2, fraction=5)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_symbols",
        "_strict_comments",
        "_started",
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Configuration is read from the active ParseConfig at construction.

        Args:
            source: Input text
            source_file: Optional source file path for locations
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._symbols = SymbolTable()
        self._strict_comments = get_parse_config().strict_comments
        self._started = False

        self._saved_pos = 0
        self._saved_lineno = 1
        self._saved_col = 1

    @property
    def symbols(self) -> SymbolTable:
        """The interning table owned by this lexer."""
        return self._symbols

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, in source order.

        Raises:
            FrontletError: If this lexer has already been scanned.
            UnterminatedCommentError: In strict comment mode only.
        """
        if self._started:
            raise FrontletError("Lexer instances are single-use; create a new Lexer to rescan")
        self._started = True

        source_len = self._source_len
        while self._pos < source_len:
            token = self._scan()
            if token is not None:
                yield token

    def _scan(self) -> Token | None:
        """Scan one token, or skip one whitespace character or comment.

        Returns:
            The scanned token, or None if only skippable input was consumed.
        """
        if self._source[self._pos] in WHITESPACE:
            self._advance()
            return None

        if self._skip_comment():
            return None

        self._save_location()

        token: Token | None = self._scan_number()
        if token is None:
            token = self._scan_word()
        if token is None:
            token = self._scan_relational_operator()
        if token is None:
            char = self._advance()
            token = Unknown(char, self._location())
        return token

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _peek(self, offset: int = 0) -> str:
        """Peek at the character offset positions ahead without advancing.

        Returns:
            The character, or empty string past end of input.
        """
        pos = self._pos + offset
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking.

        Returns:
            The consumed character.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _commit_to(self, end: int) -> None:
        """Commit position to end, updating line/column tracking.

        Uses str.count over the skipped segment instead of a per-character loop.

        Args:
            end: Position to commit to.
        """
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")

        if newline_count > 0:
            self._lineno += newline_count
            self._col = len(segment) - segment.rfind("\n")
        else:
            self._col += len(segment)

        self._pos = end

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next lexeme."""
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _location(self) -> SourceLocation:
        """Location spanning the saved start to the current position."""
        return SourceLocation(
            lineno=self._saved_lineno,
            col_offset=self._saved_col,
            offset=self._saved_pos,
            end_offset=self._pos,
            source_file=self._source_file,
        )


def tokenize(source: str, source_file: str | None = None) -> list[Token]:
    """Tokenize source into a list of tokens.

    Args:
        source: Input text
        source_file: Optional source file path for locations

    Returns:
        All tokens in source order. Whitespace and comments produce none.

    Example:
        >>> tokenize("hello = 12")
        [Word(kind=<WordKind.IDENTIFIER: 1>, text='hello'), Unknown(char='='), Number(integer=12, fraction=0)]
    """
    tokens = list(Lexer(source, source_file).tokenize())
    logger.debug("Scanned %d tokens from %d characters", len(tokens), len(source))
    return tokens
