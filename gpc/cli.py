"""Command line entry point: parse a snippet and print its syntax tree."""

import argparse
import sys

from gpc.lexer import tokenize
from gpc.parser import ParseError, parse, print_tree

DEFAULT_SOURCE = "x(y, 7);"


def main(argv=None) -> int:
    """Tokenize and parse the given source, then print the tree."""
    arg_parser = argparse.ArgumentParser(
        prog="gpc", description="Parse a source snippet and print its syntax tree."
    )
    arg_parser.add_argument(
        "source",
        nargs="?",
        default=DEFAULT_SOURCE,
        help=f"source text to parse (default: {DEFAULT_SOURCE!r})",
    )
    args = arg_parser.parse_args(argv)
    try:
        tree = parse(tokenize(args.source))
    except ParseError as exc:
        print(f"gpc: {exc}", file=sys.stderr)
        return 1
    print_tree(tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())