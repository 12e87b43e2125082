"""Diagnostics."""

from srblog.diagnostics.codes import (
    LEXER_TOKENIZER_ERROR,
    PARSER_DUPLICATE_ATTRIBUTE,
    PARSER_EXPECTED_ASSIGNMENT,
    PARSER_EXPECTED_ATTRIBUTE_NAME,
    PARSER_EXPECTED_LITERAL,
    PARSER_EXPECTED_TOKEN,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_EOF,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
    Severity,
)
from srblog.diagnostics.diagnostic import Diagnostic
from srblog.diagnostics.report import (
    collect_diagnostics,
    format_diagnostics,
    has_errors,
)

__all__ = [
    "LEXER_TOKENIZER_ERROR",
    "PARSER_DUPLICATE_ATTRIBUTE",
    "PARSER_EXPECTED_ASSIGNMENT",
    "PARSER_EXPECTED_ATTRIBUTE_NAME",
    "PARSER_EXPECTED_LITERAL",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_EOF",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "format_diagnostics",
    "has_errors",
]
