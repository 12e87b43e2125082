"""Diagnostics core types."""

from dataclasses import dataclass

from srblog.diagnostics.codes import DiagnosticSpec, Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the parser."""

    code: str
    message: str
    line: int
    severity: Severity = "error"
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, line: int, **fields: object) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.render(**fields),
            line=line,
            severity=spec.severity,
            category=spec.category,
        )

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def format(self) -> str:
        return f"Line({self.line}): {self.message}"

    def __str__(self) -> str:
        return self.format()
