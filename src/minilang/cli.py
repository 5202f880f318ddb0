"""Command-line driver: read Mini source, run both phases, print the tree."""

import argparse
import logging
import sys
from typing import Sequence, TextIO

from minilang.errors import CompilationError
from minilang.printer import print_ast
from minilang.runner import compile_source

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilang",
        description="Tokenize and parse a Mini program, then print its syntax tree.",
    )
    parser.add_argument(
        "source",
        nargs="*",
        help="Mini source; multiple arguments are joined with spaces (default: stdin)",
    )
    parser.add_argument("-f", "--file", help="read the program from this file")
    parser.add_argument("--tokens", action="store_true", help="also print the token stream")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def read_source(args: argparse.Namespace, stdin: TextIO) -> str:
    if args.source:
        return " ".join(args.source)
    if args.file:
        with open(args.file, "r", encoding="utf-8") as handle:
            return handle.read()
    if stdin.isatty():
        print("Enter Mini program (Ctrl+D to finish):", file=sys.stderr)
    return stdin.read()


def main(argv: Sequence[str] | None = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.source and args.file:
        arg_parser.error("give the program either as arguments or with --file, not both")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    origin = args.file or "standard input"
    try:
        source = read_source(args, sys.stdin)
    except OSError as exc:
        print(f"Cannot read {origin}: {exc.strerror}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as exc:
        print(f"Cannot read {origin}: not valid UTF-8 (byte {exc.start})", file=sys.stderr)
        return 2
    logger.debug("Read %d characters of source", len(source))

    try:
        result = compile_source(source)
    except CompilationError as exc:
        print(f"Compilation error: {exc}", file=sys.stderr)
        return 1

    if args.tokens:
        print("=== Tokens ===")
        for token in result.tokens:
            print(token)
        print()

    print("=== Abstract Syntax Tree ===")
    print_ast(result.program)
    print("\nProgram is syntactically correct.")
    return 0
