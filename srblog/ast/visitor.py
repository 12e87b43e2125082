"""Traversal over the document tree.

Renderers subclass `AstVisitor` and override the `visit_*` hooks they care
about. The defaults walk root and tag children in source order and treat text
and literals as leaves. Visitors only read the tree, so the same tree can be
traversed any number of times with identical results.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Generic, TextIO, TypeVar

from srblog.ast.model import AstLiteral, AstNode, AstRoot, AstTag, AstText


T = TypeVar("T")


class AstVisitor(Generic[T]):
    """Base visitor; hook return values are available to overriding subclasses."""

    def visit(self, node: AstRoot | AstNode) -> T | None:
        match node:
            case AstRoot():
                return self.visit_root(node)
            case AstTag():
                return self.visit_tag(node)
            case AstText():
                return self.visit_text(node)
            case AstLiteral():
                return self.visit_literal(node)
            case _:
                raise TypeError(f"Not an AST node: {node!r}")

    def visit_children(self, children: tuple[AstNode, ...]) -> list[T | None]:
        return [self.visit(child) for child in children]

    def visit_root(self, root: AstRoot) -> T | None:
        self.visit_children(root.children)
        return None

    def visit_tag(self, tag: AstTag) -> T | None:
        self.visit_children(tag.children)
        return None

    def visit_text(self, text: AstText) -> T | None:
        return None

    def visit_literal(self, literal: AstLiteral) -> T | None:
        return None


class AstDumper(AstVisitor[None]):
    """Reference debug visitor that renders the tree as indented lines.

    Literals print in debug form: `Str("a")`, `Float(1.0)`, `Bool(true)`.
    """

    def __init__(self, indent: str = "") -> None:
        self._indent = indent
        self._depth = 0
        self.lines: list[str] = []

    def _emit(self, line: str) -> None:
        self.lines.append(f"{self._indent * self._depth}{line}")

    def visit_tag(self, tag: AstTag) -> None:
        self._emit(f"Tag: {tag.name} {{")
        if tag.attributes:
            self._emit("Attributes: ")
            for name, value in tag.attributes.items():
                self._emit(f"  {name} = {value}")
        self._depth += 1
        self.visit_children(tag.children)
        self._depth -= 1
        self._emit("}")

    def visit_text(self, text: AstText) -> None:
        self._emit(f"TEXT: {text.text}")

    def visit_literal(self, literal: AstLiteral) -> None:
        self._emit(f"Literal: {literal}")


def dump_ast(node: AstRoot | AstNode, *, indent: str = "") -> str:
    dumper = AstDumper(indent=indent)
    dumper.visit(node)
    return "\n".join(dumper.lines)


def print_ast(node: AstRoot | AstNode, file: TextIO | None = None, *, indent: str = "") -> None:
    text = dump_ast(node, indent=indent)
    if text:
        print(text, file=file or sys.stdout)


def walk(node: AstRoot | AstNode) -> Iterator[AstRoot | AstNode]:
    """Yield `node` and its descendants in pre-order (document reading order)."""
    stack: list[AstRoot | AstNode] = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, (AstRoot, AstTag)):
            stack.extend(reversed(current.children))


__all__ = [
    "AstDumper",
    "AstVisitor",
    "dump_ast",
    "print_ast",
    "walk",
]
