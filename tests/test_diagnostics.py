from srblog.diagnostics import (
    LEXER_TOKENIZER_ERROR,
    PARSER_DUPLICATE_ATTRIBUTE,
    PARSER_EXPECTED_LITERAL,
    Diagnostic,
    collect_diagnostics,
    format_diagnostics,
    has_errors,
)


def test_diagnostic_from_spec_renders_message_and_line() -> None:
    diagnostic = Diagnostic.from_spec(PARSER_EXPECTED_LITERAL, 12, name="src")

    assert diagnostic.code == "PARSER_EXPECTED_LITERAL"
    assert diagnostic.message == "'src' must be assigned a literal value."
    assert diagnostic.line == 12
    assert diagnostic.severity == "error"
    assert diagnostic.category == "parser"
    assert diagnostic.format() == "Line(12): 'src' must be assigned a literal value."
    assert str(diagnostic) == diagnostic.format()


def test_lexer_errors_are_categorised_separately() -> None:
    diagnostic = Diagnostic.from_spec(LEXER_TOKENIZER_ERROR, 1, message="bad escape")

    assert diagnostic.category == "lexer"
    assert diagnostic.message == "tokenizer error: bad escape"


def test_has_errors_ignores_warnings() -> None:
    warning = Diagnostic.from_spec(PARSER_DUPLICATE_ATTRIBUTE, 1, name="a", tag="t")
    error = Diagnostic.from_spec(PARSER_EXPECTED_LITERAL, 2, name="a")

    assert has_errors([]) is False
    assert has_errors([warning]) is False
    assert has_errors([warning, error]) is True


def test_format_diagnostics_keeps_order_and_filters() -> None:
    warning = Diagnostic.from_spec(PARSER_DUPLICATE_ATTRIBUTE, 1, name="a", tag="t")
    error = Diagnostic.from_spec(PARSER_EXPECTED_LITERAL, 2, name="a")

    assert format_diagnostics([warning, error]) == [
        "Line(1): duplicate attribute 'a' on tag 't', last value wins",
        "Line(2): 'a' must be assigned a literal value.",
    ]
    assert format_diagnostics([warning, error], errors_only=True) == [
        "Line(2): 'a' must be assigned a literal value."
    ]


def test_collect_diagnostics_concatenates_groups_in_order() -> None:
    first = Diagnostic.from_spec(PARSER_EXPECTED_LITERAL, 1, name="a")
    second = Diagnostic.from_spec(LEXER_TOKENIZER_ERROR, 2, message="bad")
    third = Diagnostic.from_spec(PARSER_DUPLICATE_ATTRIBUTE, 3, name="a", tag="t")

    assert collect_diagnostics() == []
    assert collect_diagnostics([first], (), iter([second, third])) == [first, second, third]
