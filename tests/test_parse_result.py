from srblog.ast import AstRoot, AstText
from srblog.diagnostics import PARSER_DUPLICATE_ATTRIBUTE, PARSER_UNEXPECTED_EOF, Diagnostic
from srblog.lexer import LBRACE, RBRACE
from srblog.parser import ParseMode, ParserOptions, parse
from srblog.pipeline import ParseResult
from tests._shared_cases import tag, text


def test_parse_result_success_exposes_tree() -> None:
    result = parse([text("hello")])

    assert isinstance(result, ParseResult)
    assert result.ok is True
    assert result.has_errors is False
    assert result.as_tuple() == (AstRoot(children=(AstText("hello"),)), [])
    assert result.options == ParserOptions()


def test_parse_result_failure_keeps_diagnostics_only() -> None:
    result = parse([tag("t"), LBRACE])

    assert result.ok is False
    assert result.has_errors is True
    assert result.root is None
    assert result.diagnostics == [
        Diagnostic.from_spec(PARSER_UNEXPECTED_EOF, 1, expected=RBRACE)
    ]
    root, errors = result.as_tuple()
    assert root is None
    assert errors == ["Line(1): unexpected eof while searching for '}'"]


def test_parse_result_warnings_do_not_fail_the_parse() -> None:
    result = ParseResult(
        root=AstRoot(),
        diagnostics=[Diagnostic.from_spec(PARSER_DUPLICATE_ATTRIBUTE, 2, name="a", tag="t")],
        options=ParserOptions.for_mode(ParseMode.STRICT),
    )

    assert result.has_errors is False
    assert result.errors == []
    assert result.warnings == ["Line(2): duplicate attribute 'a' on tag 't', last value wins"]


def test_parse_result_records_resolved_mode() -> None:
    result = parse([], mode=ParseMode.STRICT)

    assert result.options.mode == ParseMode.STRICT
    assert result.options.require_tag_body is True
    assert result.options.warn_duplicate_attributes is True
