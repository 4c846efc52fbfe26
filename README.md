# gpc

The front end of a small compiler for a C-like language. It has a tokenizer,
a precedence-climbing parser that builds a syntax tree, and a register
interference graph for a register allocator to work on.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
gpc
gpc "a = b + 2;"
```

`gpc` tokenizes and parses the source text given as its one argument, or the
built-in sample `x(y, 7);` when none is given, and prints the syntax tree with
one node on each line, indented two spaces per level. For the sample:

```
[bodyNode | nullToken]
  [funcCallNode | identifier]
    [identifierNode | identifier]
    [literalNode | literal]
```

If the text cannot be parsed, the command prints `gpc: <message>` to standard
error and exits with status 1.

## Library use

```python
from gpc.lexer import tokenize
from gpc.parser import parse, format_tree, print_tree

tokens = tokenize("a = 3 + 4 * b;")
tree = parse(tokens)
print_tree(tree)
text = format_tree(tree, 0)
```

### `gpc.tokens`

`TokenType` lists every token kind; its `label` property gives the camel-case
name used in printed trees (`opPlus`, `keywordInt`, ...). `Token` is a frozen
record of `type`, `text` and, for literals, the integer `value`.

### `gpc.lexer`

- `iter_tokens(source)` yields tokens; `tokenize(source)` returns them as a
  list. A NUL character ends the input.
- Whitespace separates words. The characters `+ - * / = > < & ( ) { }` are
  tokens of their own; `;` and `,` both become `END_STATEMENT`. Any other
  character is part of a word.
- The keywords are `int`, `char`, `void`, `if`, `else` and `while`
  (`keyword_type(word)` looks one up). Words starting with a digit become
  literals whose value is read with C base prefixes (`0x1F`, `017`), taking
  the longest integer prefix. Everything else is an identifier.
- `single_char_token(char)` returns the token kind of a single character, or
  `None`.

### `gpc.parser`

- `parse(tokens)` (or `Parser(tokens).parse()`) returns a tree rooted at a
  body node. `Node` has a `type` (`NodeType`), a `token` and a list of
  `children`; `add_child` appends one and `child(index)` returns one or `None`.
- It handles binary operators ordered by `precedence(token_type)`, the
  two-token operators `==`, `+=`, `-=`, `>=` and `<=`, unary `-`, `*` and
  `&`, parenthesised expressions, `(int)` casts, `int`/`char` (and pointer)
  declarations in function headers, function calls, function definitions,
  `if`/`else`, `while` and nested `{ }` blocks.
- Problems raise `gpc.parser.ParseError`: an unexpected token, a declaration
  outside a function header, or a tree of more than 2048 nodes.
- `format_tree(node, depth)` renders a tree as text; `print_tree(node, file)`
  writes it to `file`, standard output by default.

### `gpc.interference`

`InterferenceGraph(num_colors, max_nodes)` (16 colours and 128 nodes by
default) is an undirected graph of virtual registers. `add_node(preset_color)`
adds a node, uncoloured when given `None`, and returns its index;
`add_edge`, `has_edge`, `neighbours`, `degree` and `is_k_colorable` work on
node indices. Repeated edges are ignored; self edges, unknown nodes,
out-of-range colours and adding past `max_nodes` raise errors. `LiveRange`
records the start and end address of a value's live span.

```python
from gpc.interference import InterferenceGraph

graph = InterferenceGraph(16, 128)
a = graph.add_node(None)
b = graph.add_node(None)
graph.add_edge(a, b)
assert graph.has_edge(b, a)
assert graph.is_k_colorable(a)
```

## What it does not do

The package stops at the syntax tree. It does not check types, generate code
or assign registers: the interference graph is not built from live ranges
for you, and no colouring is performed on it.