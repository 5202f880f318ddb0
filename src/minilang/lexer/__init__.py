from minilang.lexer.dfa import DFA, DFABuilder, keyword_dfa
from minilang.lexer.lexer import DEFAULT_RULES, Lexer, LexerRule, tokenize
from minilang.lexer.token import Token, TokenKind

__all__ = [
    "DEFAULT_RULES",
    "DFA",
    "DFABuilder",
    "Lexer",
    "LexerRule",
    "Token",
    "TokenKind",
    "keyword_dfa",
    "tokenize",
]
