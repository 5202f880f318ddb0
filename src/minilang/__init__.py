from minilang.errors import CompilationError, LexicalError, ParseError
from minilang.lexer import Lexer, Token, TokenKind, tokenize
from minilang.parser import Parser, Program, parse, parse_source
from minilang.printer import format_ast, print_ast
from minilang.runner import CompilationResult, compile_source

__all__ = [
    "CompilationError",
    "CompilationResult",
    "Lexer",
    "LexicalError",
    "ParseError",
    "Parser",
    "Program",
    "Token",
    "TokenKind",
    "compile_source",
    "format_ast",
    "parse",
    "parse_source",
    "print_ast",
    "tokenize",
]
