"""Error hierarchy for the Mini front end."""

from __future__ import annotations


class CompilationError(Exception):
    """Base error for every failed compilation attempt."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column


class LexicalError(CompilationError):
    """No lexical rule matches at the current offset."""

    def __init__(self, message: str, *, character: str, line: int, column: int):
        super().__init__(message, line=line, column=column)
        self.character = character


class ParseError(CompilationError):
    """The current token violates the grammar."""


class DFAConstructionError(CompilationError):
    """An automaton was built from an inconsistent transition table."""
