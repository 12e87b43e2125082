"""Token vocabulary."""

from srblog.lexer.tokens import (
    COMMA,
    EOF_TOKEN,
    EQUAL,
    LBRACE,
    LPAREN,
    RBRACE,
    RPAREN,
    BoolLiteralToken,
    CharacterToken,
    EndOfFileToken,
    ErrorToken,
    LiteralToken,
    NumberLiteralToken,
    StringLiteralToken,
    TagToken,
    TextToken,
    Token,
    TokenKind,
)

__all__ = [
    "COMMA",
    "EOF_TOKEN",
    "EQUAL",
    "LBRACE",
    "LPAREN",
    "RBRACE",
    "RPAREN",
    "BoolLiteralToken",
    "CharacterToken",
    "EndOfFileToken",
    "ErrorToken",
    "LiteralToken",
    "NumberLiteralToken",
    "StringLiteralToken",
    "TagToken",
    "TextToken",
    "Token",
    "TokenKind",
]
