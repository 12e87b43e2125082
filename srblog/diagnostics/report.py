"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from srblog.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostics(
    diagnostics: Iterable[Diagnostic],
    *,
    errors_only: bool = False,
) -> list[str]:
    """Render diagnostics as `Line(<n>): <message>` strings, in order."""
    return [d.format() for d in diagnostics if d.is_error or not errors_only]
