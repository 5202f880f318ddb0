from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class NumberLiteral:
    lexeme: str
    is_real: bool
    line: int
    column: int


@dataclass(slots=True, frozen=True)
class IdentifierExpr:
    name: str
    line: int
    column: int


@dataclass(slots=True, frozen=True)
class BinaryExpr:
    left: "Expression"
    operator: str
    right: "Expression"
    line: int
    column: int


Expression = BinaryExpr | NumberLiteral | IdentifierExpr


@dataclass(slots=True, frozen=True)
class Assignment:
    identifier: str
    expression: Expression
    line: int
    column: int


Statement = Assignment


@dataclass(slots=True, frozen=True)
class Program:
    statements: tuple[Statement, ...]
    line: int = 1
    column: int = 1


Node = Program | Statement | Expression
