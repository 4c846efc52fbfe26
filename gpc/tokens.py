"""Token kinds and the token record produced by the lexer."""

from dataclasses import dataclass
from enum import IntEnum, auto


def _camel_case(name: str) -> str:
    first, *rest = name.lower().split("_")
    return first + "".join(part.capitalize() for part in rest)


class TokenType(IntEnum):
    """Every kind of token, in the order the language defines them."""

    OP_PLUS = auto()
    OP_MINUS = auto()
    OP_DECREMENT = auto()
    OP_INCREMENT = auto()
    OP_EQUAL = auto()
    OP_MUL = auto()
    OP_DIV = auto()
    OP_LOGICAL_OR = auto()
    OP_LOGICAL_AND = auto()
    OP_LOGICAL_NOT = auto()
    OP_BITWISE_NOT = auto()
    OP_BITWISE_OR = auto()
    OP_SHIFT_RIGHT = auto()
    OP_SHIFT_LEFT = auto()
    OP_BITWISE_AND = auto()
    OP_DEREFERENCE = auto()
    OP_REFERENCE = auto()
    OP_CMP_EQUALS = auto()
    OP_CMP_GREATER = auto()
    OP_CMP_LESS = auto()
    OP_CMP_GR_EQ = auto()
    OP_CMP_LE_EQ = auto()
    CURLY_BRACE_R = auto()
    CURLY_BRACE_L = auto()
    PARENTHESES_L = auto()
    PARENTHESES_R = auto()
    KEYWORD_IF = auto()
    KEYWORD_ELSE = auto()
    KEYWORD_WHILE = auto()
    KEYWORD_INT = auto()
    KEYWORD_CHAR = auto()
    KEYWORD_INT_PTR = auto()
    KEYWORD_CHAR_PTR = auto()
    KEYWORD_VOID = auto()
    END_STATEMENT = auto()
    IDENTIFIER = auto()
    LITERAL = auto()
    NULL_TOKEN = auto()

    @property
    def label(self) -> str:
        """The camel-case name used when printing trees, e.g. ``opPlus``."""
        return _camel_case(self.name)


@dataclass(frozen=True)
class Token:
    """A lexed token: its kind, the text it came from and, for literals, its value."""

    type: TokenType
    text: str = ""
    value: int | None = None