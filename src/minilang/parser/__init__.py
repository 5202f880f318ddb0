from minilang.parser.ast import (
    Assignment,
    BinaryExpr,
    Expression,
    IdentifierExpr,
    Node,
    NumberLiteral,
    Program,
    Statement,
)
from minilang.parser.parser import Parser, parse, parse_source

__all__ = [
    "Assignment",
    "BinaryExpr",
    "Expression",
    "IdentifierExpr",
    "Node",
    "NumberLiteral",
    "Parser",
    "Program",
    "Statement",
    "parse",
    "parse_source",
]
