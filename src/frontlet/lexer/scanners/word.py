"""Identifier and keyword scanning mixin."""

from dataclasses import replace

from frontlet.lexer.symbols import SymbolTable
from frontlet.location import SourceLocation
from frontlet.tokens import Word


class WordScannerMixin:
    """Mixin scanning identifiers and keywords.

    A word starts at an alphabetic character and extends over alphanumerics
    and underscores. Classification goes through the lexer's SymbolTable.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _symbols: SymbolTable

    def _peek(self, offset: int = 0) -> str:
        """Peek at a character. Implemented by Lexer."""
        raise NotImplementedError

    def _location(self) -> SourceLocation:
        """Location spanning the saved start to the current position."""
        raise NotImplementedError

    def _commit_to(self, end: int) -> None:
        """Advance position to end. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_word(self) -> Word | None:
        """Scan a word at the current position.

        Returns:
            Word token stamped with its location, or None if no word
            starts here.
        """
        if not self._peek().isalpha():
            return None

        source = self._source
        end = self._pos + 1
        while end < self._source_len and (source[end].isalnum() or source[end] == "_"):
            end += 1

        text = source[self._pos : end]
        self._commit_to(end)
        return replace(self._symbols.intern(text), location=self._location())
