"""High-level parse entrypoint for srblog markup."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from srblog.diagnostics import collect_diagnostics, has_errors
from srblog.lexer import Token
from srblog.parser.grammar import parse_source_file
from srblog.parser.options import ParseMode, ParserOptions
from srblog.parser.parser import Parser
from srblog.parser.token_source import PositionedToken, TokenSource, TokenStream
from srblog.pipeline.result import ParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def _resolve_source(source: TokenSource | Iterable[Token | PositionedToken]) -> TokenSource:
    if isinstance(source, TokenSource):
        return source
    if isinstance(source, (str, bytes)):
        raise TypeError("parse() consumes tokens, not raw text; scan the text first")
    return TokenStream(source)


def parse(
    source: TokenSource | Iterable[Token | PositionedToken],
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParseResult:
    """Parse a token stream into a document tree.

    The returned result holds the tree only if no error was recorded; the
    diagnostics are available either way.
    """
    resolved_options = _resolve_options(options=options, mode=mode)
    parser = Parser(_resolve_source(source), options=resolved_options)

    root = parse_source_file(parser)
    diagnostics = collect_diagnostics(parser.finish())
    failed = has_errors(diagnostics)

    logger.debug(
        "parsed %d top-level nodes with %d diagnostics (%s)",
        len(root.children),
        len(diagnostics),
        "failed" if failed else "ok",
    )

    return ParseResult(
        root=None if failed else root,
        diagnostics=diagnostics,
        options=resolved_options,
    )
