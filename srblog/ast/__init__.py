"""Typed document tree and its visitors."""

from srblog.ast.model import (
    AstLiteral,
    AstNode,
    AstRoot,
    AstTag,
    AstText,
    LiteralKind,
)
from srblog.ast.visitor import AstDumper, AstVisitor, dump_ast, print_ast, walk

__all__ = [
    "AstDumper",
    "AstLiteral",
    "AstNode",
    "AstRoot",
    "AstTag",
    "AstText",
    "AstVisitor",
    "LiteralKind",
    "dump_ast",
    "print_ast",
    "walk",
]
