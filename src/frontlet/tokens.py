"""Token definitions for the Frontlet lexer.

The lexer produces a stream of tokens drawn from a closed set of
variants, one frozen dataclass per lexical class:

Token
├── Word                (identifiers and the keywords true/false)
├── Number              (non-negative decimal literal, split at the point)
├── RelationalOperator  (< <= == != > >=)
└── Unknown             (any other single character)

Tokens compare by lexical content only. The source location each token
carries is excluded from equality, so ``Number(3, 14)`` equals the token
scanned from ``"3.14"`` anywhere in the input.

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass, field
from enum import Enum, auto

from frontlet.location import SourceLocation

_NOWHERE = SourceLocation.unknown()


class WordKind(Enum):
    """Classification of a scanned word."""

    IDENTIFIER = auto()
    TRUE = auto()
    FALSE = auto()


class RelationalKind(Enum):
    """Relational operator kinds."""

    LESS = auto()  # <
    LESS_OR_EQUAL = auto()  # <=
    EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # !=
    GREATER = auto()  # >
    GREATER_OR_EQUAL = auto()  # >=


@dataclass(frozen=True, slots=True)
class Word:
    """An identifier or keyword.

    Attributes:
        kind: IDENTIFIER, TRUE or FALSE
        text: The word as written
        location: Where the word was scanned (not compared)
    """

    kind: WordKind
    text: str
    location: SourceLocation = field(default=_NOWHERE, compare=False, repr=False)

    @property
    def lexeme(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Number:
    """A non-negative decimal literal.

    The integer and fractional parts are accumulated independently, so
    leading zeros of the fraction are not preserved: ``.05`` and ``.5``
    both have ``fraction == 5``. The exact source text is kept in
    ``lexeme``.

    Attributes:
        integer: Digits before the decimal point (0 if absent)
        fraction: Digits after the decimal point (0 if absent)
        lexeme: Source text of the literal (not compared)
        location: Where the literal was scanned (not compared)
    """

    integer: int
    fraction: int = 0
    lexeme: str = field(default="", compare=False, repr=False)
    location: SourceLocation = field(default=_NOWHERE, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.lexeme:
            text = f"{self.integer}.{self.fraction}" if self.fraction else str(self.integer)
            object.__setattr__(self, "lexeme", text)


@dataclass(frozen=True, slots=True)
class RelationalOperator:
    """A one- or two-character relational operator."""

    kind: RelationalKind
    text: str
    location: SourceLocation = field(default=_NOWHERE, compare=False, repr=False)

    @property
    def lexeme(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Unknown:
    """A single character no other lexical rule accepted."""

    char: str
    location: SourceLocation = field(default=_NOWHERE, compare=False, repr=False)

    @property
    def lexeme(self) -> str:
        return self.char


Token = Word | Number | RelationalOperator | Unknown
