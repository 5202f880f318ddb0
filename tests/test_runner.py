import logging

import pytest

from minilang.errors import CompilationError, LexicalError, ParseError
from minilang.lexer.dfa import keyword_dfa
from minilang.lexer.lexer import DEFAULT_RULES, Lexer, LexerRule
from minilang.lexer.token import TokenKind
from minilang.runner import compile_source


def test_compile_source_returns_tokens_and_program():
    result = compile_source("total := price * 2")

    assert [token.kind for token in result.tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.ASSIGNMENT,
        TokenKind.IDENTIFIER,
        TokenKind.OPERATOR,
        TokenKind.INTEGER,
    ]
    assert result.program.statements[0].identifier == "total"


def test_compile_source_propagates_errors():
    with pytest.raises(LexicalError):
        compile_source("x := 12.")
    with pytest.raises(ParseError):
        compile_source("x 5")


def test_errors_share_a_common_base():
    assert issubclass(LexicalError, CompilationError)
    assert issubclass(ParseError, CompilationError)

    error = ParseError("bad", line=2, column=7)
    assert error.message == "bad"
    assert (error.line, error.column) == (2, 7)
    assert ParseError("no position").line is None


def test_compile_source_uses_injected_lexer():
    rules = [*DEFAULT_RULES, LexerRule(TokenKind.KEYWORD, lambda: keyword_dfa("let"), priority=60)]

    # the grammar has no keyword productions, so a keyword cannot start a statement
    with pytest.raises(ParseError, match="Expected identifier"):
        compile_source("let x := 1", lexer=Lexer(rules=rules))


def test_phases_log_at_debug_level(caplog):
    caplog.set_level(logging.DEBUG, logger="minilang")

    compile_source("a := 1\nb := a")

    assert "Tokenized 13 characters into 6 tokens" in caplog.text
    assert "Parsed 2 statements from 6 tokens" in caplog.text
