"""Parse carriers consumed by renderers."""

from srblog.pipeline.result import ParseResult

__all__ = ["ParseResult"]
