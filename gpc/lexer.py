"""Turns source text into a stream of tokens."""

import re
from collections.abc import Iterator

from gpc.tokens import Token, TokenType

_DELIMITERS = frozenset(" \n\t\v\f\r")

_SINGLE_CHAR_TOKENS = {
    "+": TokenType.OP_PLUS,
    "*": TokenType.OP_MUL,
    "/": TokenType.OP_DIV,
    "-": TokenType.OP_MINUS,
    "=": TokenType.OP_EQUAL,
    ">": TokenType.OP_CMP_GREATER,
    "<": TokenType.OP_CMP_LESS,
    "&": TokenType.OP_BITWISE_AND,
    "(": TokenType.PARENTHESES_L,
    ")": TokenType.PARENTHESES_R,
    "{": TokenType.CURLY_BRACE_L,
    "}": TokenType.CURLY_BRACE_R,
    ";": TokenType.END_STATEMENT,
    ",": TokenType.END_STATEMENT,
}

_KEYWORDS = {
    "int": TokenType.KEYWORD_INT,
    "char": TokenType.KEYWORD_CHAR,
    "void": TokenType.KEYWORD_VOID,
    "if": TokenType.KEYWORD_IF,
    "else": TokenType.KEYWORD_ELSE,
    "while": TokenType.KEYWORD_WHILE,
}

_HEX = re.compile(r"0[xX]([0-9a-fA-F]+)")
_OCTAL = re.compile(r"0[0-7]*")
_DECIMAL = re.compile(r"[0-9]+")


def single_char_token(char: str) -> TokenType | None:
    """Return the token kind a single character stands for, or None."""
    return _SINGLE_CHAR_TOKENS.get(char)


def keyword_type(word: str) -> TokenType | None:
    """Return the keyword token kind for an exact keyword, or None."""
    return _KEYWORDS.get(word)


def _parse_integer(text: str) -> int:
    """Read the longest integer prefix, with C-style base detection."""
    if match := _HEX.match(text):
        return int(match.group(1), 16)
    if match := _OCTAL.match(text):
        return int(match.group(), 8)
    match = _DECIMAL.match(text)
    return int(match.group()) if match else 0


def iter_tokens(source: str) -> Iterator[Token]:
    """Yield tokens from ``source``; a NUL character ends the input."""
    source = source.split("\0", 1)[0]
    length = len(source)
    pos = 0
    while True:
        while pos < length and source[pos] in _DELIMITERS:
            pos += 1
        if pos >= length:
            return
        start = pos
        while (
            pos < length
            and source[pos] not in _DELIMITERS
            and source[pos] not in _SINGLE_CHAR_TOKENS
        ):
            pos += 1
        if pos == start:
            char = source[pos]
            pos += 1
            yield Token(_SINGLE_CHAR_TOKENS[char], char)
            continue
        word = source[start:pos]
        keyword = keyword_type(word)
        if keyword is not None:
            yield Token(keyword, word)
        elif "0" <= word[0] <= "9":
            yield Token(TokenType.LITERAL, word, _parse_integer(word))
        else:
            yield Token(TokenType.IDENTIFIER, word)


def tokenize(source: str) -> list[Token]:
    """Return every token in ``source`` as a list."""
    return list(iter_tokens(source))