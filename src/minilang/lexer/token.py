from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    IDENTIFIER = "IDENTIFIER"
    INTEGER = "INTEGER"
    REAL = "REAL"
    OPERATOR = "OPERATOR"
    # Reserved; the default lexer rules never produce it.
    KEYWORD = "KEYWORD"
    ASSIGNMENT = "ASSIGNMENT"


@dataclass(slots=True, frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.kind.value} {self.lexeme!r} at {self.line}:{self.column}"
