"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    severity: Severity = "error"
    category: str | None = None

    def render(self, **fields: object) -> str:
        """Fill the message template with `fields`."""
        return self.message.format(**fields)


LEXER_TOKENIZER_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_TOKENIZER_ERROR",
    message="tokenizer error: {message}",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_ATTRIBUTE_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_ATTRIBUTE_NAME",
    message="variable must be a string name but got {found}",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_ASSIGNMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_ASSIGNMENT",
    message="expected assignment after '{name}'",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_LITERAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_LITERAL",
    message="'{name}' must be assigned a literal value.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="expected {expected} but got {found}",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="unexpected {found}",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_EOF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_EOF",
    message="unexpected eof while searching for {expected}",
    severity="error",
    category="parser",
)

PARSER_DUPLICATE_ATTRIBUTE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DUPLICATE_ATTRIBUTE",
    message="duplicate attribute '{name}' on tag '{tag}', last value wins",
    severity="warning",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="body of '{tag}' nested deeper than {limit} levels, skipping it",
    severity="error",
    category="parser",
)
