"""AST data model for srblog documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import json
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias, TypeVar

if TYPE_CHECKING:
    from srblog.ast.visitor import AstVisitor

T = TypeVar("T")


class LiteralKind(StrEnum):
    STR = "str"
    FLOAT = "float"
    BOOL = "bool"


@dataclass(frozen=True, slots=True)
class AstLiteral:
    """Scalar value: either bare document content or an attribute value."""

    kind: LiteralKind
    value: str | float | bool

    @staticmethod
    def string(value: str) -> AstLiteral:
        return AstLiteral(LiteralKind.STR, value)

    @staticmethod
    def number(value: float) -> AstLiteral:
        return AstLiteral(LiteralKind.FLOAT, float(value))

    @staticmethod
    def boolean(value: bool) -> AstLiteral:
        return AstLiteral(LiteralKind.BOOL, bool(value))

    def accept(self, visitor: AstVisitor[T]) -> T:
        return visitor.visit_literal(self)

    def __str__(self) -> str:
        match self.kind:
            case LiteralKind.STR:
                return f"Str({json.dumps(self.value, ensure_ascii=False)})"
            case LiteralKind.FLOAT:
                return f"Float({self.value!r})"
            case LiteralKind.BOOL:
                return f"Bool({str(self.value).lower()})"


@dataclass(frozen=True, slots=True)
class AstText:
    """Run of free text."""

    text: str

    def accept(self, visitor: AstVisitor[T]) -> T:
        return visitor.visit_text(self)


@dataclass(frozen=True, slots=True)
class AstTag:
    """Named tag with attributes and ordered children, e.g. `@image(src="a.png")`."""

    name: str
    attributes: Mapping[str, AstLiteral] = field(default_factory=dict)
    children: tuple[AstNode, ...] = ()

    def __post_init__(self) -> None:
        # Both are frozen so a closed subtree can never change.
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))

    def __hash__(self) -> int:
        return hash((self.name, frozenset(self.attributes.items()), self.children))

    def get(self, name: str, default: Any = None) -> AstLiteral | Any:
        return self.attributes.get(name, default)

    def accept(self, visitor: AstVisitor[T]) -> T:
        return visitor.visit_tag(self)


@dataclass(frozen=True, slots=True)
class AstRoot:
    """Document root; owns every node of one parse."""

    children: tuple[AstNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_empty(self) -> bool:
        return len(self.children) == 0

    def accept(self, visitor: AstVisitor[T]) -> T:
        return visitor.visit_root(self)


AstNode: TypeAlias = AstTag | AstText | AstLiteral


__all__ = [
    "AstLiteral",
    "AstNode",
    "AstRoot",
    "AstTag",
    "AstText",
    "LiteralKind",
]
