import dataclasses
import io

import pytest

from srblog.ast import (
    AstDumper,
    AstLiteral,
    AstRoot,
    AstTag,
    AstText,
    AstVisitor,
    LiteralKind,
    dump_ast,
    print_ast,
    walk,
)
from srblog.parser import parse
from tests._shared_cases import BLOG_POST_TOKENS, BLOG_POST_TREE

BLOG_POST_DUMP = "\n".join(
    [
        "Tag: header {",
        "Attributes: ",
        '  title = Str("Hello")',
        "  level = Float(1.0)",
        "TEXT: Welcome",
        "Tag: image {",
        "Attributes: ",
        '  src = Str("a.png")',
        "}",
        "}",
        "Literal: Bool(true)",
        "TEXT: tail",
    ]
)


class RecordingVisitor(AstVisitor[None]):
    def __init__(self) -> None:
        self.events: list[str] = []

    def visit_root(self, root: AstRoot) -> None:
        self.events.append("root")
        super().visit_root(root)

    def visit_tag(self, tag: AstTag) -> None:
        self.events.append(f"tag:{tag.name}:{','.join(tag.attributes)}")
        super().visit_tag(tag)
        self.events.append(f"end:{tag.name}")

    def visit_text(self, text: AstText) -> None:
        self.events.append(f"text:{text.text}")

    def visit_literal(self, literal: AstLiteral) -> None:
        self.events.append(f"literal:{literal.kind}:{literal.value}")


class TextCollector(AstVisitor[str]):
    """Visitor that returns values instead of recording side effects."""

    def visit_root(self, root: AstRoot) -> str:
        return "".join(self.visit_children(root.children))

    def visit_tag(self, tag: AstTag) -> str:
        return f"<{tag.name}>" + "".join(self.visit_children(tag.children)) + f"</{tag.name}>"

    def visit_text(self, text: AstText) -> str:
        return text.text

    def visit_literal(self, literal: AstLiteral) -> str:
        return str(literal.value)


def test_default_traversal_visits_children_in_order() -> None:
    visitor = RecordingVisitor()
    BLOG_POST_TREE.accept(visitor)

    assert visitor.events == [
        "root",
        "tag:header:title,level",
        "text:Welcome",
        "tag:image:src",
        "end:image",
        "end:header",
        "literal:bool:True",
        "text:tail",
    ]


def test_visit_and_accept_dispatch_to_the_same_hook() -> None:
    via_visit = RecordingVisitor()
    via_accept = RecordingVisitor()

    via_visit.visit(AstText("x"))
    AstText("x").accept(via_accept)

    assert via_visit.events == via_accept.events == ["text:x"]


def test_visitor_return_values() -> None:
    assert TextCollector().visit(BLOG_POST_TREE) == "<header>Welcome<image></image></header>Truetail"


def test_base_visitor_walks_without_output() -> None:
    assert AstVisitor().visit(BLOG_POST_TREE) is None


def test_visit_rejects_non_nodes() -> None:
    with pytest.raises(TypeError):
        AstVisitor().visit("not a node")  # type: ignore[arg-type]


def test_traversal_is_idempotent() -> None:
    root = parse(BLOG_POST_TOKENS).root
    assert root is not None

    first = RecordingVisitor()
    second = RecordingVisitor()
    root.accept(first)
    root.accept(second)

    assert first.events == second.events
    assert dump_ast(root) == dump_ast(root)
    assert root == BLOG_POST_TREE


def test_dump_ast_reference_output() -> None:
    assert dump_ast(BLOG_POST_TREE) == BLOG_POST_DUMP


def test_dump_ast_with_indent() -> None:
    tree = AstRoot(children=(AstTag(name="p", children=(AstText("hi"),)),))

    assert dump_ast(tree, indent="  ") == "Tag: p {\n  TEXT: hi\n}"


def test_print_ast_writes_to_file() -> None:
    out = io.StringIO()
    print_ast(BLOG_POST_TREE, file=out)

    assert out.getvalue() == BLOG_POST_DUMP + "\n"


def test_print_ast_of_empty_root_prints_nothing() -> None:
    out = io.StringIO()
    print_ast(AstRoot(), file=out)

    assert out.getvalue() == ""


def test_dumper_collects_lines() -> None:
    dumper = AstDumper()
    AstLiteral.string("s").accept(dumper)

    assert dumper.lines == ['Literal: Str("s")']


def test_walk_is_preorder() -> None:
    names = []
    for node in walk(BLOG_POST_TREE):
        match node:
            case AstRoot():
                names.append("root")
            case AstTag(name=name):
                names.append(name)
            case AstText(text=value):
                names.append(value)
            case AstLiteral(value=value):
                names.append(str(value))

    assert names == ["root", "header", "Welcome", "image", "True", "tail"]


def test_nodes_are_immutable() -> None:
    tag = AstTag(name="t", attributes={"a": AstLiteral.string("x")}, children=[AstText("c")])

    assert isinstance(tag.children, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tag.name = "other"  # type: ignore[misc]
    with pytest.raises(TypeError):
        tag.attributes["a"] = AstLiteral.string("y")  # type: ignore[index]


def test_tag_attributes_are_copied_on_construction() -> None:
    attributes = {"a": AstLiteral.number(1)}
    tag = AstTag(name="t", attributes=attributes)
    attributes["b"] = AstLiteral.number(2)

    assert list(tag.attributes) == ["a"]


def test_equal_tags_hash_equal_regardless_of_attribute_order() -> None:
    first = AstTag(name="t", attributes={"a": AstLiteral.number(1), "b": AstLiteral.boolean(True)})
    second = AstTag(name="t", attributes={"b": AstLiteral.boolean(True), "a": AstLiteral.number(1)})

    assert first == second
    assert hash(first) == hash(second)


def test_literal_kind_distinguishes_equal_python_values() -> None:
    assert AstLiteral.boolean(True) != AstLiteral.number(1.0)
    assert AstLiteral.number(0) != AstLiteral.boolean(False)
    assert AstLiteral.number(3).kind is LiteralKind.FLOAT
    assert AstLiteral.number(3).value == 3.0
    assert isinstance(AstLiteral.number(3).value, float)


def test_literal_debug_format() -> None:
    assert str(AstLiteral.string('say "hi"\n')) == 'Str("say \\"hi\\"\\n")'
    assert str(AstLiteral.number(2.5)) == "Float(2.5)"
    assert str(AstLiteral.boolean(False)) == "Bool(false)"
