"""Keyword and identifier interning table.

Each Lexer owns one SymbolTable. Keywords are seeded at construction so
they always win over identifier classification; every other word is
classified as an identifier the first time it is seen and cached, so
later occurrences resolve to the same variant.

Thread Safety:
Not thread-safe. A table is instance-local to a single Lexer.

"""

from __future__ import annotations

from frontlet.tokens import Word, WordKind

KEYWORDS: dict[str, WordKind] = {
    "true": WordKind.TRUE,
    "false": WordKind.FALSE,
}


class SymbolTable:
    """Interning table mapping word text to its classified Word token.

    Usage:
            >>> table = SymbolTable()
            >>> table.intern("true").kind
            <WordKind.TRUE: 2>
            >>> table.intern("hello").kind
            <WordKind.IDENTIFIER: 1>
            >>> "hello" in table
            True

    """

    __slots__ = ("_words",)

    def __init__(self) -> None:
        self._words: dict[str, Word] = {
            text: Word(kind, text) for text, kind in KEYWORDS.items()
        }

    def lookup(self, text: str) -> Word | None:
        """Return the cached word for text, or None if never seen."""
        return self._words.get(text)

    def intern(self, text: str) -> Word:
        """Return the cached word for text, classifying it on first sight."""
        word = self._words.get(text)
        if word is None:
            word = Word(WordKind.IDENTIFIER, text)
            self._words[text] = word
        return word

    def __contains__(self, text: object) -> bool:
        return text in self._words

    def __len__(self) -> int:
        return len(self._words)
