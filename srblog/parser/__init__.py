"""Parser infrastructure (token source + recursive-descent parser + grammar)."""

from srblog.parser.grammar import (
    parse_attribute_list,
    parse_document,
    parse_source_file,
    parse_tag_block,
    parse_tag_body,
    skip_tag_body,
    token_to_literal,
)
from srblog.parser.markup import parse
from srblog.parser.options import ParseMode, ParserOptions
from srblog.parser.parser import Parser, ParserProgress
from srblog.parser.token_source import PositionedToken, TokenSource, TokenStream

__all__ = [
    "ParseMode",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "PositionedToken",
    "TokenSource",
    "TokenStream",
    "parse",
    "parse_attribute_list",
    "parse_document",
    "parse_source_file",
    "parse_tag_block",
    "parse_tag_body",
    "skip_tag_body",
    "token_to_literal",
]
