"""Token vocabulary shared by token sources and the parser."""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Final, TypeAlias


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1
    ERROR = 2

    # -------------------------
    # Content
    # -------------------------
    TAG = 10
    TEXT = 11

    # -------------------------
    # Literals
    # -------------------------
    STRING = 20
    NUMBER = 21
    BOOL = 22

    # -------------------------
    # Punctuation: ( ) { } = ,
    # -------------------------
    CHARACTER = 30

    @property
    def is_literal(self) -> bool:
        return self in (
            TokenKind.STRING,
            TokenKind.NUMBER,
            TokenKind.BOOL,
        )


@dataclass(frozen=True, slots=True)
class TagToken:
    """Start of a tag construct, e.g. `@image`."""

    kind: ClassVar[TokenKind] = TokenKind.TAG

    name: str

    def __str__(self) -> str:
        return f"tag '{self.name}'"


@dataclass(frozen=True, slots=True)
class TextToken:
    """Run of literal text with the lines it spans."""

    kind: ClassVar[TokenKind] = TokenKind.TEXT

    text: str
    line_start: int = 0
    line_end_with_content: int = 0
    line_end: int = 0

    def __str__(self) -> str:
        return f"text '{self.text}'"


@dataclass(frozen=True, slots=True)
class StringLiteralToken:
    kind: ClassVar[TokenKind] = TokenKind.STRING

    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True, slots=True)
class NumberLiteralToken:
    kind: ClassVar[TokenKind] = TokenKind.NUMBER

    value: float

    def __str__(self) -> str:
        return repr(float(self.value))


@dataclass(frozen=True, slots=True)
class BoolLiteralToken:
    kind: ClassVar[TokenKind] = TokenKind.BOOL

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class CharacterToken:
    """Single structural delimiter character."""

    kind: ClassVar[TokenKind] = TokenKind.CHARACTER

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"CharacterToken expects a single character, got {self.char!r}")

    def __str__(self) -> str:
        return f"'{self.char}'"


@dataclass(frozen=True, slots=True)
class ErrorToken:
    """Lexical failure reported by the token source."""

    kind: ClassVar[TokenKind] = TokenKind.ERROR

    message: str

    def __str__(self) -> str:
        return f"error '{self.message}'"


@dataclass(frozen=True, slots=True)
class EndOfFileToken:
    kind: ClassVar[TokenKind] = TokenKind.EOF

    def __str__(self) -> str:
        return "end of file"


LiteralToken: TypeAlias = StringLiteralToken | NumberLiteralToken | BoolLiteralToken
Token: TypeAlias = (
    TagToken
    | TextToken
    | StringLiteralToken
    | NumberLiteralToken
    | BoolLiteralToken
    | CharacterToken
    | ErrorToken
    | EndOfFileToken
)


EOF_TOKEN: Final[EndOfFileToken] = EndOfFileToken()

LPAREN: Final[CharacterToken] = CharacterToken("(")
RPAREN: Final[CharacterToken] = CharacterToken(")")
LBRACE: Final[CharacterToken] = CharacterToken("{")
RBRACE: Final[CharacterToken] = CharacterToken("}")
EQUAL: Final[CharacterToken] = CharacterToken("=")
COMMA: Final[CharacterToken] = CharacterToken(",")
