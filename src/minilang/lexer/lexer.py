import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from minilang.errors import LexicalError
from minilang.lexer.dfa import (
    DFA,
    assignment_dfa,
    identifier_dfa,
    integer_dfa,
    operator_dfa,
    real_dfa,
)
from minilang.lexer.token import Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class LexerRule:
    """A lexical category: the automaton that recognizes it and its priority.

    At each offset the rules are tried from the highest priority down and the
    first one with a non-empty match wins, even if a lower-priority rule would
    match a longer lexeme. Equal priorities keep registration order.
    """

    kind: TokenKind
    factory: Callable[[], DFA]
    priority: int


DEFAULT_RULES: tuple[LexerRule, ...] = (
    LexerRule(TokenKind.IDENTIFIER, identifier_dfa, priority=50),
    LexerRule(TokenKind.REAL, real_dfa, priority=40),
    LexerRule(TokenKind.INTEGER, integer_dfa, priority=30),
    LexerRule(TokenKind.ASSIGNMENT, assignment_dfa, priority=20),
    LexerRule(TokenKind.OPERATOR, operator_dfa, priority=10),
)


class Lexer:
    def __init__(self, rules: Sequence[LexerRule] | None = None):
        if rules is None:
            rules = DEFAULT_RULES
        ordered = sorted(rules, key=lambda rule: rule.priority, reverse=True)
        self._automata: list[tuple[TokenKind, DFA]] = [
            (rule.kind, rule.factory()) for rule in ordered
        ]

    def tokenize(self, source: str) -> list[Token]:
        tokens: list[Token] = []
        index = 0
        line = 1
        column = 1
        length = len(source)

        while index < length:
            char = source[index]
            if char.isspace():
                line, column = _advance_position(char, line, column)
                index += 1
                continue

            found = self._match_at(source, index)
            if found is None:
                raise LexicalError(
                    f"Lexical error at {line}:{column} -> Illegal character: {char!r}",
                    character=char,
                    line=line,
                    column=column,
                )

            kind, match_length = found
            lexeme = source[index : index + match_length]
            tokens.append(Token(kind, lexeme, line, column))
            for consumed in lexeme:
                line, column = _advance_position(consumed, line, column)
            index += match_length

        logger.debug("Tokenized %d characters into %d tokens", length, len(tokens))
        return tokens

    def _match_at(self, source: str, index: int) -> tuple[TokenKind, int] | None:
        for kind, automaton in self._automata:
            match_length = automaton.longest_match(source, index)
            if match_length:
                return kind, match_length
        return None


def _advance_position(char: str, line: int, column: int) -> tuple[int, int]:
    if char == "\n":
        return line + 1, 1
    return line, column + 1


def tokenize(source: str) -> list[Token]:
    return Lexer().tokenize(source)
