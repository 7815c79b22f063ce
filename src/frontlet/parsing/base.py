"""Base class for the recursive-descent parser family.

A parser owns its input and a single lookahead cursor. Input is either raw
text, where every character is one symbol, or a token sequence produced by
the lexer, where every token's lexeme is one symbol. Error positions are
character offsets for text and token indices for token sequences.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per input.

"""

from __future__ import annotations

from collections.abc import Sequence

from frontlet.config import get_parse_config
from frontlet.errors import FrontletError, ParseError, TrailingInputError
from frontlet.location import SourceLocation
from frontlet.parsing.lookahead import LookaheadMixin
from frontlet.tokens import Token
from frontlet.utils.logger import get_logger

logger = get_logger(__name__)


class RecursiveDescentParser(LookaheadMixin):
    """Recursive-descent recognizer for one grammar.

    Subclasses set ``terminals`` and implement ``_derive``, which recognizes
    one occurrence of the start symbol and recurses through ``_descend``.
    Every grammar in the family is written so that no production recurses
    on its own nonterminal before consuming a token.

    Usage:
            >>> parser = ParenthesesParser("(())()")
            >>> parser.parse()
            >>> parser.lookahead_index
            6

    """

    __slots__ = (
        "_source",
        "_tokens",
        "_symbols",
        "_source_file",
        "_lookahead_index",
        "_last_consumed",
        "_depth",
        "_max_depth",
        "_parsed",
    )

    def __init__(
        self,
        source: str | Sequence[Token],
        source_file: str | None = None,
    ) -> None:
        """Initialize parser over text or a pre-scanned token sequence.

        Args:
            source: Input text, or tokens from ``frontlet.tokenize``
            source_file: Optional source file path for error locations
        """
        if isinstance(source, str):
            self._source: str | None = source
            self._tokens: tuple[Token, ...] | None = None
            self._symbols: Sequence[str] = source
        else:
            self._source = None
            self._tokens = tuple(source)
            self._symbols = tuple(token.lexeme for token in self._tokens)

        self._source_file = source_file
        self._lookahead_index = 0
        self._last_consumed: int | None = None
        self._depth = 0
        self._max_depth = get_parse_config().max_depth
        self._parsed = False

    @property
    def lookahead_index(self) -> int:
        """How far recognition proceeded."""
        return self._lookahead_index

    def parse(self) -> None:
        """Recognize the whole input.

        Raises:
            ParseError: If the input is not in the grammar's language.
            FrontletError: If called more than once on the same parser.
        """
        if self._parsed:
            raise FrontletError(f"{type(self).__name__}.parse() may only be called once")
        self._parsed = True

        try:
            self._parse_start()
        except ParseError as e:
            logger.debug("%s rejected input: %s", type(self).__name__, e.message)
            raise
        logger.debug("%s accepted %d symbols", type(self).__name__, len(self._symbols))

    def _parse_start(self) -> None:
        """Recognize the start symbol, then require end of input."""
        self._descend()
        self._expect_end()

    def _descend(self) -> None:
        """Recognize one occurrence of the start symbol."""
        with self._nested():
            self._derive()

    def _derive(self) -> None:
        """Grammar-specific production choice. Implemented by subclasses."""
        raise NotImplementedError

    def _expect_end(self) -> None:
        """Require that the whole input was consumed.

        Raises:
            TrailingInputError: If symbols remain after the cursor.
        """
        position = self._lookahead_index
        if position < len(self._symbols):
            raise TrailingInputError(position, self._location_at(position))

    def _location_at(self, position: int) -> SourceLocation | None:
        """Source location of the symbol at position.

        Returns:
            A location for text input; the token's own location for token
            input, or None past the last token.
        """
        if self._tokens is not None:
            if position < len(self._tokens):
                return self._tokens[position].location
            return None
        assert self._source is not None
        return SourceLocation.at_offset(self._source, position, self._source_file)


def accepts(parser_class: type[RecursiveDescentParser], source: str | Sequence[Token]) -> bool:
    """Return whether parser_class accepts source, discarding the diagnostic."""
    try:
        parser_class(source).parse()
    except ParseError:
        return False
    return True
