"""Relational operator scanning mixin."""

from frontlet.location import SourceLocation
from frontlet.tokens import RelationalKind, RelationalOperator

# Two-character operators come first so ">=" never splits into ">" "="
RELATIONAL_OPERATORS: tuple[tuple[str, RelationalKind], ...] = (
    ("<=", RelationalKind.LESS_OR_EQUAL),
    ("==", RelationalKind.EQUAL),
    ("!=", RelationalKind.NOT_EQUAL),
    (">=", RelationalKind.GREATER_OR_EQUAL),
    ("<", RelationalKind.LESS),
    (">", RelationalKind.GREATER),
)


class OperatorScannerMixin:
    """Mixin scanning relational operators.

    Candidates are tested against the source without moving the cursor;
    only the first match is committed.

    """

    # These will be set by the Lexer class
    _source: str
    _pos: int

    def _location(self) -> SourceLocation:
        """Location spanning the saved start to the current position."""
        raise NotImplementedError

    def _commit_to(self, end: int) -> None:
        """Advance position to end. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_relational_operator(self) -> RelationalOperator | None:
        """Scan a relational operator at the current position."""
        for text, kind in RELATIONAL_OPERATORS:
            if self._source.startswith(text, self._pos):
                self._commit_to(self._pos + len(text))
                return RelationalOperator(kind, text, self._location())
        return None
