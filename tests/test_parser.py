import io

import pytest

from gpc.lexer import tokenize
from gpc.parser import (
    NODE_LIMIT,
    Node,
    NodeType,
    ParseError,
    Parser,
    format_tree,
    parse,
    precedence,
    print_tree,
)
from gpc.tokens import TokenType

EXAMPLE_TREE = (
    "[bodyNode | nullToken]\n"
    "  [funcCallNode | identifier]\n"
    "    [identifierNode | identifier]\n"
    "    [literalNode | literal]\n"
)


def tree(source):
    return parse(tokenize(source))


def test_example_tree_format():
    assert format_tree(tree("x(y, 7);")) == EXAMPLE_TREE


def test_print_tree_matches_format():
    out = io.StringIO()
    root = tree("x(y, 7);")
    print_tree(root, out)
    assert out.getvalue() == format_tree(root)


def test_format_tree_depth_indents_every_line():
    text = format_tree(tree("x(y, 7);"), 1)
    assert all(line.startswith("  ") for line in text.splitlines())


def test_format_none_is_empty():
    assert format_tree(None) == ""


def test_precedence_values():
    assert precedence(TokenType.OP_MUL) == 100
    assert precedence(TokenType.OP_PLUS) == 90
    assert precedence(TokenType.OP_EQUAL) == 10
    assert precedence(TokenType.END_STATEMENT) == 0


def test_multiplication_binds_tighter_than_addition():
    root = tree("a = b + c * d;")
    assign = root.child(0)
    assert assign.type is NodeType.OPERATOR
    assert assign.token.type is TokenType.OP_EQUAL
    assert assign.child(0).token.text == "a"
    plus = assign.child(1)
    assert plus.token.type is TokenType.OP_PLUS
    assert plus.child(0).token.text == "b"
    times = plus.child(1)
    assert times.token.type is TokenType.OP_MUL
    assert [c.token.text for c in times.children] == ["c", "d"]


def test_subtraction_is_left_associative():
    root = tree("a - b - c;")
    outer = root.child(0)
    assert outer.token.type is TokenType.OP_MINUS
    assert outer.child(0).token.type is TokenType.OP_MINUS
    assert outer.child(1).token.text == "c"


@pytest.mark.parametrize(
    "source, kind",
    [
        ("a == b;", TokenType.OP_CMP_EQUALS),
        ("a += b;", TokenType.OP_INCREMENT),
        ("a -= b;", TokenType.OP_DECREMENT),
        ("a >= b;", TokenType.OP_CMP_GR_EQ),
        ("a <= b;", TokenType.OP_CMP_LE_EQ),
    ],
)
def test_compound_operators(source, kind):
    node = tree(source).child(0)
    assert node.token.type is kind
    assert [c.token.text for c in node.children] == ["a", "b"]


def test_unary_minus():
    node = tree("-a;").child(0)
    assert node.type is NodeType.OPERATOR
    assert node.token.type is TokenType.OP_MINUS
    assert len(node.children) == 1


def test_if_else():
    node = tree("if (a) { b; } else { c; }").child(0)
    assert node.type is NodeType.CONDITIONAL
    assert node.token.type is TokenType.KEYWORD_IF
    assert len(node.children) == 3
    assert node.child(1).type is NodeType.BODY
    assert node.child(2).child(0).token.text == "c"


def test_while_body_wraps_block():
    node = tree("while (a) { b; }").child(0)
    assert node.token.type is TokenType.KEYWORD_WHILE
    body = node.child(1)
    assert body.type is NodeType.BODY
    assert body.child(0).type is NodeType.BODY


def test_function_definition():
    node = tree("int f(int a) { a = a; }").child(0)
    assert node.type is NodeType.FUNC_DEF
    assert node.token.text == "f"
    types = [c.type for c in node.children]
    assert types == [NodeType.LITERAL, NodeType.DECLARATION, NodeType.BODY]
    assert node.child(0).token.type is TokenType.KEYWORD_INT
    assert node.child(1).child(0).token.text == "a"


def test_pointer_parameter():
    decl = tree("int f(int *p) { }").child(0).child(1)
    assert decl.token.type is TokenType.KEYWORD_INT_PTR


def test_cast():
    node = tree("(int) x;").child(0)
    assert node.type is NodeType.CAST
    assert node.token.type is TokenType.KEYWORD_INT
    assert node.child(0).token.text == "x"


def test_empty_source_gives_empty_body():
    root = parse([])
    assert root.type is NodeType.BODY
    assert root.children == []


def test_parser_can_parse_twice():
    parser = Parser(tokenize("a;"))
    first = parser.parse()
    second = parser.parse()
    assert first == second
    assert len(second.children) == 1
    assert second.child(0).token.type is TokenType.IDENTIFIER
    assert second.child(0).token.text == "a"


@pytest.mark.parametrize("source", [";", "int x;", "f(a"])
def test_errors(source):
    with pytest.raises(ParseError):
        tree(source)


def test_node_limit():
    assert len(tree("a;" * (NODE_LIMIT - 1)).children) == NODE_LIMIT - 1
    with pytest.raises(ParseError):
        tree("a;" * NODE_LIMIT)


def test_node_child_out_of_range():
    node = Node(NodeType.BODY)
    child = Node(NodeType.LITERAL)
    node.add_child(child)
    assert node.child(0) is child
    assert node.child(1) is None
    assert node.child(-1) is None


def test_node_type_labels():
    func = tree("int f(int a) { }").child(0)
    assert func.type.label == "funcDefNode"
    assert func.child(1).type.label == "declarationNode"