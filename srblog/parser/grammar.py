"""Markup grammar routines that build the document tree."""

from srblog.ast import AstLiteral, AstNode, AstRoot, AstTag, AstText
from srblog.diagnostics import (
    LEXER_TOKENIZER_ERROR,
    PARSER_DUPLICATE_ATTRIBUTE,
    PARSER_EXPECTED_ASSIGNMENT,
    PARSER_EXPECTED_ATTRIBUTE_NAME,
    PARSER_EXPECTED_LITERAL,
    PARSER_EXPECTED_TOKEN,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_EOF,
    PARSER_UNEXPECTED_TOKEN,
)
from srblog.lexer import (
    COMMA,
    EQUAL,
    LBRACE,
    LPAREN,
    RBRACE,
    RPAREN,
    BoolLiteralToken,
    CharacterToken,
    EndOfFileToken,
    ErrorToken,
    NumberLiteralToken,
    StringLiteralToken,
    TagToken,
    TextToken,
    Token,
)
from srblog.parser.parser import Parser, ParserProgress


def parse_source_file(parser: Parser) -> AstRoot:
    """Parse the whole token stream into a root node.

    The document rule stops at any delimiter; at top level there is nothing
    for a delimiter to close, so it is reported and skipped.
    """
    children: list[AstNode] = []
    progress = ParserProgress()

    while True:
        progress.assert_progressing(parser)
        parse_document(parser, children)
        if parser.at_eof():
            break
        parser.recover(PARSER_UNEXPECTED_TOKEN, found=parser.current)

    return AstRoot(children=tuple(children))


def parse_document(parser: Parser, children: list[AstNode]) -> None:
    while True:
        token = parser.current
        match token:
            case TagToken():
                children.append(parse_tag_block(parser))
            case StringLiteralToken() | NumberLiteralToken() | BoolLiteralToken():
                children.append(token_to_literal(token))
                parser.bump()
            case TextToken(text=text):
                children.append(AstText(text))
                parser.bump()
            case ErrorToken(message=message):
                parser.recover(LEXER_TOKENIZER_ERROR, message=message)
            case CharacterToken() | EndOfFileToken():
                # Delimiters belong to the enclosing construct.
                return
            case _:
                raise TypeError(f"Token source produced a non-token: {token!r}")


def parse_tag_block(parser: Parser) -> AstTag:
    tag = parser.current
    if not isinstance(tag, TagToken):
        raise ValueError(f"parse_tag_block called at {tag}")
    parser.bump()

    attributes: dict[str, AstLiteral] = {}
    children: list[AstNode] = []

    if parser.eat(LPAREN):
        parse_attribute_list(parser, tag.name, attributes)

    if parser.eat(LBRACE):
        if parser.depth >= parser.options.max_depth:
            parser.error(PARSER_NESTING_TOO_DEEP, tag=tag.name, limit=parser.options.max_depth)
            skip_tag_body(parser)
        else:
            with parser.nested():
                parse_tag_body(parser, children)
    elif parser.options.require_tag_body:
        parser.error(PARSER_EXPECTED_TOKEN, expected=LBRACE, found=parser.current)

    return AstTag(name=tag.name, attributes=attributes, children=tuple(children))


def parse_attribute_list(
    parser: Parser,
    tag_name: str,
    attributes: dict[str, AstLiteral],
) -> None:
    """Parse `name = literal` pairs up to and including the closing `)`."""
    while not parser.expect(RPAREN):
        name_token = parser.current
        name: str | None = None
        if isinstance(name_token, TextToken):
            name = name_token.text
            parser.bump()
        else:
            parser.recover(PARSER_EXPECTED_ATTRIBUTE_NAME, found=name_token)

        label = name if name is not None else str(name_token)

        if not parser.eat(EQUAL):
            parser.recover(PARSER_EXPECTED_ASSIGNMENT, name=label)

        value = parser.current
        if value.kind.is_literal:
            if name is not None:
                if name in attributes and parser.options.warn_duplicate_attributes:
                    parser.error(PARSER_DUPLICATE_ATTRIBUTE, name=name, tag=tag_name)
                attributes[name] = token_to_literal(value)
            parser.bump()
        else:
            parser.recover(PARSER_EXPECTED_LITERAL, name=label)

        parser.eat(COMMA)


def parse_tag_body(parser: Parser, children: list[AstNode]) -> None:
    """Parse child documents up to and including the closing `}`."""
    progress = ParserProgress()

    while not parser.expect(RBRACE):
        progress.assert_progressing(parser)
        parse_document(parser, children)
        if parser.at_eof() or parser.at_token(RBRACE):
            continue
        parser.recover(PARSER_UNEXPECTED_TOKEN, found=parser.current)


def skip_tag_body(parser: Parser) -> None:
    """Skip a body without building nodes, up to and including its closing `}`."""
    open_bodies = 1
    while open_bodies:
        if parser.at_eof():
            parser.error(PARSER_UNEXPECTED_EOF, expected=RBRACE)
            return
        if parser.at_token(LBRACE):
            open_bodies += 1
        elif parser.at_token(RBRACE):
            open_bodies -= 1
        parser.bump()


def token_to_literal(token: Token) -> AstLiteral:
    match token:
        case StringLiteralToken(value=value):
            return AstLiteral.string(value)
        case NumberLiteralToken(value=value):
            return AstLiteral.number(value)
        case BoolLiteralToken(value=value):
            return AstLiteral.boolean(value)
        case _:
            raise ValueError(f"Not a literal token: {token!r}")
