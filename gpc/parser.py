"""Builds a syntax tree from a token list and prints it."""

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from enum import IntEnum, auto
from typing import TextIO

from gpc.tokens import Token, TokenType

NODE_LIMIT = 2048


class ParseError(Exception):
    """Raised when the token stream cannot be turned into a tree."""


class NodeType(IntEnum):
    """Kinds of syntax tree nodes."""

    BODY = auto()
    OPERATOR = auto()
    CONDITIONAL = auto()
    LITERAL = auto()
    FUNC_DEF = auto()
    FUNC_CALL = auto()
    IDENTIFIER = auto()
    CAST = auto()
    DECLARATION = auto()

    @property
    def label(self) -> str:
        """The camel-case name used when printing trees, e.g. ``bodyNode``."""
        first, *rest = self.name.lower().split("_")
        return first + "".join(part.capitalize() for part in rest) + "Node"


def _null_token() -> Token:
    return Token(TokenType.NULL_TOKEN)


@dataclass
class Node:
    """A syntax tree node with its token and ordered children."""

    type: NodeType
    token: Token = field(default_factory=_null_token)
    children: list["Node"] = field(default_factory=list)

    def add_child(self, child: "Node") -> None:
        """Append ``child`` after the existing children."""
        self.children.append(child)

    def child(self, index: int) -> "Node | None":
        """Return the child at ``index``, or None when there is none."""
        if 0 <= index < len(self.children):
            return self.children[index]
        return None


_PRECEDENCE = {
    TokenType.OP_MUL: 100,
    TokenType.OP_DIV: 100,
    TokenType.OP_PLUS: 90,
    TokenType.OP_MINUS: 90,
    TokenType.OP_SHIFT_LEFT: 80,
    TokenType.OP_SHIFT_RIGHT: 80,
    TokenType.OP_CMP_GREATER: 70,
    TokenType.OP_CMP_LESS: 70,
    TokenType.OP_CMP_GR_EQ: 70,
    TokenType.OP_CMP_LE_EQ: 70,
    TokenType.OP_CMP_EQUALS: 60,
    TokenType.OP_BITWISE_AND: 50,
    TokenType.OP_BITWISE_OR: 40,
    TokenType.OP_LOGICAL_AND: 30,
    TokenType.OP_LOGICAL_OR: 20,
    TokenType.OP_EQUAL: 10,
    TokenType.OP_INCREMENT: 10,
    TokenType.OP_DECREMENT: 10,
}

_COMPOUND_OPERATORS = {
    TokenType.OP_EQUAL: TokenType.OP_CMP_EQUALS,
    TokenType.OP_PLUS: TokenType.OP_INCREMENT,
    TokenType.OP_MINUS: TokenType.OP_DECREMENT,
    TokenType.OP_CMP_GREATER: TokenType.OP_CMP_GR_EQ,
    TokenType.OP_CMP_LESS: TokenType.OP_CMP_LE_EQ,
}

_UNARY_PRECEDENCE = 110
_TYPE_KEYWORDS = (TokenType.KEYWORD_INT, TokenType.KEYWORD_CHAR)


def precedence(token_type: TokenType) -> int:
    """Binding strength of a binary operator; 0 for anything else."""
    return _PRECEDENCE.get(token_type, 0)


class Parser:
    """Recursive-descent parser over a list of tokens."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens = list(tokens)
        self._pos = 0
        self._allocated = 0

    def parse(self) -> Node:
        """Parse the whole token list into a body node."""
        self._pos = 0
        self._allocated = 0
        return self._body()

    def _peek(self, offset: int = 0) -> Token:
        index = self._pos + offset
        return self._tokens[index] if index < len(self._tokens) else _null_token()

    def _eat(self) -> Token:
        token = self._peek()
        self._pos += 1
        return token

    def _new_node(self, node_type: NodeType, token: Token | None = None) -> Node:
        if self._allocated >= NODE_LIMIT:
            raise ParseError(f"node pool exhausted after {NODE_LIMIT} nodes")
        self._allocated += 1
        return Node(node_type, token if token is not None else _null_token())

    def _argument(self) -> Node:
        token = self._eat()
        kind = token.type
        if kind is TokenType.LITERAL:
            return self._new_node(NodeType.LITERAL, token)
        if kind is TokenType.IDENTIFIER:
            if self._peek().type is TokenType.PARENTHESES_L:
                node = self._func_call(token)
                self._eat()
                return node
            return self._new_node(NodeType.IDENTIFIER, token)
        if kind in _TYPE_KEYWORDS:
            if self._peek().type is TokenType.OP_MUL:
                self._eat()
                pointer = (
                    TokenType.KEYWORD_INT_PTR
                    if kind is TokenType.KEYWORD_INT
                    else TokenType.KEYWORD_CHAR_PTR
                )
                token = replace(token, type=pointer)
            node = self._new_node(NodeType.DECLARATION, token)
            node.add_child(self._argument())
            return node
        if kind is TokenType.PARENTHESES_L:
            if self._peek().type is TokenType.KEYWORD_INT:
                cast_type = self._eat()
                self._eat()
                node = self._new_node(NodeType.CAST, cast_type)
                node.add_child(self._argument())
                return node
            node = self._expression(0)
            self._eat()
            return node
        if kind in (TokenType.OP_MINUS, TokenType.OP_MUL, TokenType.OP_BITWISE_AND):
            node = self._new_node(NodeType.OPERATOR, token)
            node.add_child(self._expression(_UNARY_PRECEDENCE))
            return node
        raise ParseError(f"unexpected token {kind.label} {token.text!r}".rstrip())

    def _func_call(self, name: Token) -> Node:
        call = self._new_node(NodeType.FUNC_CALL, name)
        self._eat()
        while self._peek().type is not TokenType.PARENTHESES_R:
            call.add_child(self._expression(0))
            if self._peek().type is TokenType.PARENTHESES_R:
                break
            self._eat()
        return call

    def _peek_operator(self) -> Token:
        token = self._peek()
        if self._peek(1).type is TokenType.OP_EQUAL and token.type in _COMPOUND_OPERATORS:
            self._eat()
            return replace(token, type=_COMPOUND_OPERATORS[token.type])
        return token

    def _expression(self, min_precedence: int) -> Node:
        left = self._argument()
        while True:
            operator = self._peek_operator()
            strength = precedence(operator.type)
            if not strength or strength < min_precedence:
                return left
            self._eat()
            right = self._expression(strength + 1)
            parent = self._new_node(NodeType.OPERATOR, operator)
            parent.add_child(left)
            parent.add_child(right)
            left = parent

    def _if(self) -> Node:
        node = self._new_node(NodeType.CONDITIONAL)
        node.add_child(self._expression(0))
        self._eat()
        node.add_child(self._body())
        if self._peek().type is TokenType.KEYWORD_ELSE:
            self._eat()
            self._eat()
            node.add_child(self._body())
        node.token = Token(TokenType.KEYWORD_IF)
        return node

    def _while(self) -> Node:
        node = self._new_node(NodeType.CONDITIONAL)
        node.add_child(self._expression(0))
        node.add_child(self._body())
        node.token = Token(TokenType.KEYWORD_WHILE)
        return node

    def _func_def(self) -> Node:
        node = self._new_node(NodeType.FUNC_DEF)
        node.add_child(self._new_node(NodeType.LITERAL, self._eat()))
        node.token = self._eat()
        self._eat()
        while self._peek().type is not TokenType.PARENTHESES_R:
            node.add_child(self._argument())
        self._eat()
        self._eat()
        node.add_child(self._body())
        return node

    def _body(self) -> Node:
        body = self._new_node(NodeType.BODY)
        while (kind := self._peek().type) not in (
            TokenType.NULL_TOKEN,
            TokenType.CURLY_BRACE_R,
        ):
            if kind is TokenType.CURLY_BRACE_L:
                self._eat()
                body.add_child(self._body())
                continue
            if kind is TokenType.KEYWORD_IF:
                self._eat()
                body.add_child(self._if())
                continue
            if kind is TokenType.KEYWORD_WHILE:
                self._eat()
                body.add_child(self._while())
                continue
            if kind in _TYPE_KEYWORDS:
                if self._peek(2).type is TokenType.PARENTHESES_L:
                    body.add_child(self._func_def())
                    continue
                raise ParseError("declarations are only supported in function headers")
            body.add_child(self._expression(0))
            self._eat()
        self._eat()
        return body


def parse(tokens: Iterable[Token]) -> Node:
    """Parse ``tokens`` into a tree rooted at a body node."""
    return Parser(tokens).parse()


def _tree_lines(node: Node, depth: int) -> Iterator[str]:
    yield f"{'  ' * depth}[{node.type.label} | {node.token.type.label}]\n"
    for child in node.children:
        yield from _tree_lines(child, depth + 1)


def format_tree(node: Node | None, depth: int = 0) -> str:
    """Render the tree one node per line, indented two spaces per level."""
    if node is None:
        return ""
    return "".join(_tree_lines(node, depth))


def print_tree(node: Node | None, file: TextIO | None = None) -> None:
    """Write the rendered tree to ``file`` (standard output by default)."""
    out = file if file is not None else sys.stdout
    out.write(format_tree(node))
    out.flush()