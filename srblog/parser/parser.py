"""Recursive-descent parser core: current token, matching and error recovery."""

from contextlib import contextmanager
from dataclasses import dataclass

from srblog.diagnostics import (
    PARSER_UNEXPECTED_EOF,
    Diagnostic,
    DiagnosticSpec,
)
from srblog.lexer import Token, TokenKind
from srblog.parser.options import ParserOptions
from srblog.parser.token_source import TokenSource


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: int | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(
                f"Parser stopped making progress at {parser.current} (line {parser.line_number})"
            )


class Parser:
    """Pulls tokens one at a time and records diagnostics instead of raising.

    The first token is pulled on construction.
    """

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._diagnostics: list[Diagnostic] = []
        self._position = 0
        self._depth = 0
        self._current: Token = self._source.next_token()

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> Token:
        return self._current

    @property
    def position(self) -> int:
        """Number of tokens consumed so far."""
        return self._position

    @property
    def line_number(self) -> int:
        return self._source.line_number

    @property
    def depth(self) -> int:
        """Number of tag bodies currently open."""
        return self._depth

    @contextmanager
    def nested(self):
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def at(self, kind: TokenKind) -> bool:
        return self._current.kind == kind

    def at_eof(self) -> bool:
        return self._current.kind == TokenKind.EOF

    def at_token(self, token: Token) -> bool:
        """Kind match, except characters which must match exactly."""
        if self._current.kind != token.kind:
            return False
        if token.kind == TokenKind.CHARACTER:
            return self._current == token
        return True

    def bump(self) -> None:
        if self.at_eof():
            return
        self._current = self._source.next_token()
        self._position += 1

    def eat(self, token: Token) -> bool:
        if self.at_token(token):
            self.bump()
            return True
        return False

    def expect(self, token: Token) -> bool:
        """Consume `token` if current; end of file also counts, with a diagnostic.

        Loops closing on a delimiter use this so that a missing delimiter at
        the end of input still terminates them.
        """
        if self.eat(token):
            return True

        if self.at_eof():
            self.recover(PARSER_UNEXPECTED_EOF, expected=token)
            return True

        return False

    def error(self, spec: DiagnosticSpec, **fields: object) -> None:
        self._diagnostics.append(Diagnostic.from_spec(spec, self.line_number, **fields))

    def recover(self, spec: DiagnosticSpec, **fields: object) -> None:
        """Record a diagnostic at the current line, then skip one token."""
        self.error(spec, **fields)
        self.bump()

    def finish(self) -> list[Diagnostic]:
        return self._diagnostics
