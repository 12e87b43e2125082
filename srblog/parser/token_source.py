"""Token source contract consumed by the parser, plus an in-memory implementation."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from srblog.lexer import EOF_TOKEN, TextToken, Token, TokenKind


@runtime_checkable
class TokenSource(Protocol):
    """Pull-based token producer.

    `next_token` returns `EndOfFileToken` forever once the input is exhausted.
    `line_number` is 1-based, never decreases, and describes the token most
    recently returned by `next_token`.
    """

    def next_token(self) -> Token: ...

    @property
    def line_number(self) -> int: ...


@dataclass(frozen=True, slots=True)
class PositionedToken:
    """Token paired with the source line it was scanned on."""

    token: Token
    line: int


class TokenStream:
    """`TokenSource` over an already-scanned sequence of tokens.

    Entries are either bare tokens or `PositionedToken`s. Text tokens carry
    their own line span, so they move the line to `line_end` when it is set.
    """

    def __init__(
        self,
        tokens: Iterable[Token | PositionedToken],
        *,
        first_line: int = 1,
    ) -> None:
        if first_line < 1:
            raise ValueError("first_line must be 1 or greater")
        self._tokens: Iterator[Token | PositionedToken] = iter(tokens)
        self._line = first_line
        self._exhausted = False

    @property
    def line_number(self) -> int:
        return self._line

    @property
    def is_exhausted(self) -> bool:
        return self._exhausted

    def next_token(self) -> Token:
        if self._exhausted:
            return EOF_TOKEN

        entry = next(self._tokens, None)
        if entry is None:
            self._exhausted = True
            return EOF_TOKEN

        if isinstance(entry, PositionedToken):
            token = entry.token
            self._move_to(entry.line)
        else:
            token = entry
            if isinstance(token, TextToken) and token.line_end > 0:
                self._move_to(token.line_end)

        if token.kind == TokenKind.EOF:
            self._exhausted = True
        return token

    def _move_to(self, line: int) -> None:
        if line > self._line:
            self._line = line
