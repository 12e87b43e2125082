"""Parse result carrier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from srblog.diagnostics import format_diagnostics, has_errors

if TYPE_CHECKING:
    from srblog.ast import AstRoot
    from srblog.diagnostics import Diagnostic
    from srblog.parser.options import ParserOptions


@dataclass(slots=True)
class ParseResult:
    """Outcome of one parse: the tree or nothing, plus every diagnostic."""

    root: AstRoot | None
    diagnostics: list[Diagnostic]
    options: ParserOptions

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def ok(self) -> bool:
        return self.root is not None

    @property
    def errors(self) -> list[str]:
        """Error diagnostics formatted as `Line(<n>): <message>`, in source order."""
        return format_diagnostics(self.diagnostics, errors_only=True)

    @property
    def warnings(self) -> list[str]:
        return [d.format() for d in self.diagnostics if not d.is_error]

    def as_tuple(self) -> tuple[AstRoot | None, list[str]]:
        return self.root, self.errors
