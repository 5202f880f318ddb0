from dataclasses import dataclass

from minilang.lexer.lexer import Lexer
from minilang.lexer.token import Token
from minilang.parser.ast import Program
from minilang.parser.parser import Parser


@dataclass(slots=True, frozen=True)
class CompilationResult:
    tokens: list[Token]
    program: Program


def compile_source(source: str, lexer: Lexer | None = None) -> CompilationResult:
    """Run both front-end phases; lexical and parse errors propagate unchanged."""
    tokens = (lexer or Lexer()).tokenize(source)
    program = Parser(tokens).parse_program()
    return CompilationResult(tokens=tokens, program=program)
