import logging
from typing import Sequence

from minilang.errors import ParseError
from minilang.lexer.lexer import tokenize
from minilang.lexer.token import Token, TokenKind
from minilang.parser.ast import (
    Assignment,
    BinaryExpr,
    Expression,
    IdentifierExpr,
    NumberLiteral,
    Program,
)

logger = logging.getLogger(__name__)


class Parser:
    """Recursive-descent parser over a borrowed token list.

    Grammar, lowest precedence first::

        Program    := Statement*
        Statement  := IDENTIFIER ':=' Expression
        Expression := Term (('+'|'-') Term)*
        Term       := Factor (('*'|'/') Factor)*
        Factor     := Primary ('^' Factor)?
        Primary    := IDENTIFIER | INTEGER | REAL

    ``+ - * /`` fold to the left; ``^`` folds to the right.
    """

    def __init__(self, tokens: Sequence[Token]):
        self._tokens = tokens
        self._index = 0

    def parse_program(self) -> Program:
        line, column = 1, 1
        if self._tokens:
            line, column = self._tokens[0].line, self._tokens[0].column

        statements: list[Assignment] = []
        while not self._at_end():
            statements.append(self.parse_statement())

        logger.debug("Parsed %d statements from %d tokens", len(statements), len(self._tokens))
        return Program(statements=tuple(statements), line=line, column=column)

    def parse_statement(self) -> Assignment:
        identifier = self._expect(
            TokenKind.IDENTIFIER, "Expected identifier at the start of a statement"
        )
        self._expect(
            TokenKind.ASSIGNMENT, f"Expected ':=' after identifier {identifier.lexeme!r}"
        )
        expression = self.parse_expression()
        return Assignment(
            identifier=identifier.lexeme,
            expression=expression,
            line=identifier.line,
            column=identifier.column,
        )

    def parse_expression(self) -> Expression:
        left = self._parse_term()
        operator = self._match_operator("+", "-")
        while operator is not None:
            right = self._parse_term()
            left = BinaryExpr(left, operator.lexeme, right, operator.line, operator.column)
            operator = self._match_operator("+", "-")
        return left

    def _parse_term(self) -> Expression:
        left = self._parse_factor()
        operator = self._match_operator("*", "/")
        while operator is not None:
            right = self._parse_factor()
            left = BinaryExpr(left, operator.lexeme, right, operator.line, operator.column)
            operator = self._match_operator("*", "/")
        return left

    def _parse_factor(self) -> Expression:
        operands = [self._parse_primary()]
        operators: list[Token] = []
        operator = self._match_operator("^")
        while operator is not None:
            operators.append(operator)
            operands.append(self._parse_primary())
            operator = self._match_operator("^")

        result = operands.pop()
        for operator in reversed(operators):
            base = operands.pop()
            result = BinaryExpr(base, operator.lexeme, result, operator.line, operator.column)
        return result

    def _parse_primary(self) -> Expression:
        token = self._peek()
        if token is not None:
            if token.kind is TokenKind.INTEGER or token.kind is TokenKind.REAL:
                self._consume()
                return NumberLiteral(
                    lexeme=token.lexeme,
                    is_real=token.kind is TokenKind.REAL,
                    line=token.line,
                    column=token.column,
                )
            if token.kind is TokenKind.IDENTIFIER:
                self._consume()
                return IdentifierExpr(name=token.lexeme, line=token.line, column=token.column)

        if self._at_end():
            raise self._error("Unexpected end of input while parsing expression")
        raise self._error("Expected expression (identifier or number)")

    def _expect(self, kind: TokenKind, message: str) -> Token:
        token = self._peek()
        if token is None or token.kind is not kind:
            raise self._error(message)
        return self._consume()

    def _match_operator(self, *operators: str) -> Token | None:
        token = self._peek()
        if token is None or token.kind is not TokenKind.OPERATOR:
            return None
        if token.lexeme not in operators:
            return None
        return self._consume()

    def _error(self, message: str) -> ParseError:
        token = self._current()
        return ParseError(
            f"{message} at line {token.line}, column {token.column}",
            line=token.line,
            column=token.column,
        )

    def _current(self) -> Token:
        """The token to blame for an error: the lookahead, or the last token at end of input."""
        if not self._tokens:
            raise ParseError("Unexpected end of input at start of file")
        if self._at_end():
            return self._tokens[-1]
        return self._tokens[self._index]

    def _peek(self) -> Token | None:
        if self._at_end():
            return None
        return self._tokens[self._index]

    def _consume(self) -> Token:
        token = self._tokens[self._index]
        self._index += 1
        return token

    def _at_end(self) -> bool:
        return self._index >= len(self._tokens)


def parse(tokens: Sequence[Token]) -> Program:
    return Parser(tokens).parse_program()


def parse_source(source: str) -> Program:
    return parse(tokenize(source))
