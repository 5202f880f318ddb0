"""Indented debug rendering of a parsed program."""

import sys
from typing import TextIO, assert_never

from minilang.parser.ast import (
    Assignment,
    BinaryExpr,
    IdentifierExpr,
    Node,
    NumberLiteral,
    Program,
)

INDENT_STEP = 2


def format_ast(node: Node, indent: int = 0) -> str:
    return "\n".join(_render(node, indent))


def print_ast(program: Program, file: TextIO | None = None) -> None:
    print(format_ast(program), file=file or sys.stdout)


def _render(root: Node, indent: int) -> list[str]:
    lines: list[str] = []
    # explicit stack: operator chains can nest deeper than the recursion limit
    stack: list[tuple[Node, int]] = [(root, indent)]

    while stack:
        node, depth = stack.pop()
        prefix = " " * depth
        child = depth + INDENT_STEP

        if isinstance(node, Program):
            lines.append(f"{prefix}Program")
            stack.extend((statement, child) for statement in reversed(node.statements))
        elif isinstance(node, Assignment):
            lines.append(f"{prefix}Assignment: {node.identifier}")
            stack.append((node.expression, child))
        elif isinstance(node, BinaryExpr):
            lines.append(f"{prefix}BinaryExpr '{node.operator}'")
            stack.append((node.right, child))
            stack.append((node.left, child))
        elif isinstance(node, NumberLiteral):
            label = "RealLiteral" if node.is_real else "IntegerLiteral"
            lines.append(f"{prefix}{label}: {node.lexeme}")
        elif isinstance(node, IdentifierExpr):
            lines.append(f"{prefix}IdentifierExpr: {node.name}")
        else:
            assert_never(node)

    return lines
