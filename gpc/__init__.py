"""Tokenizer, syntax tree parser and register interference graph for a small C-like compiler."""

__version__ = "0.1.0"
__all__ = ["cli", "interference", "lexer", "parser", "tokens"]