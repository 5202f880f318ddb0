"""Table-driven deterministic finite automata used by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from minilang.errors import DFAConstructionError

START = "START"

OPERATOR_CHARS = "+-*/^"


@dataclass(slots=True, frozen=True)
class DFA:
    """An immutable automaton; missing transitions reject."""

    start: str
    accepting: frozenset[str]
    transitions: Mapping[tuple[str, str], str]

    def __post_init__(self):
        # private read-only copies, whatever the caller passed in
        object.__setattr__(self, "accepting", frozenset(self.accepting))
        object.__setattr__(self, "transitions", MappingProxyType(dict(self.transitions)))

    def step(self, state: str, char: str) -> str | None:
        return self.transitions.get((state, char))

    def accepts(self, text: str) -> bool:
        state = self.start
        for char in text:
            next_state = self.step(state, char)
            if next_state is None:
                return False
            state = next_state
        return state in self.accepting

    def longest_match(self, text: str, offset: int = 0) -> int | None:
        """Return the length of the longest accepted prefix of ``text[offset:]``.

        The scan keeps running after an accepting state is reached and stops at
        the first missing transition, so the result is the last accepting
        position seen, not the last position reached. ``None`` means no
        non-empty prefix is accepted.
        """
        state = self.start
        last_accept: int | None = None

        for index in range(offset, len(text)):
            next_state = self.step(state, text[index])
            if next_state is None:
                break
            state = next_state
            if state in self.accepting:
                last_accept = index - offset + 1

        return last_accept


class DFABuilder:
    def __init__(self):
        self._transitions: dict[tuple[str, str], str] = {}

    def add_transition(self, from_state: str, char: str, to_state: str) -> DFABuilder:
        if len(char) != 1:
            raise DFAConstructionError(f"Transition label must be one character, got {char!r}")

        existing = self._transitions.get((from_state, char))
        if existing is not None and existing != to_state:
            raise DFAConstructionError(
                f"Conflicting transition from {from_state} on {char!r}: "
                f"{existing} vs {to_state}"
            )
        self._transitions[(from_state, char)] = to_state
        return self

    def add_transition_range(
        self, from_state: str, start_char: str, end_char: str, to_state: str
    ) -> DFABuilder:
        if len(start_char) != 1 or len(end_char) != 1:
            raise DFAConstructionError(
                f"Range bounds must be single characters, got {start_char!r}..{end_char!r}"
            )
        if start_char > end_char:
            raise DFAConstructionError(f"Empty character range {start_char!r}..{end_char!r}")

        for code in range(ord(start_char), ord(end_char) + 1):
            self.add_transition(from_state, chr(code), to_state)
        return self

    def build(self, start: str, accepting: set[str] | frozenset[str]) -> DFA:
        return DFA(
            start=start,
            accepting=frozenset(accepting),
            transitions=self._transitions,
        )


def _add_letters(builder: DFABuilder, from_state: str, to_state: str) -> None:
    builder.add_transition_range(from_state, "a", "z", to_state)
    builder.add_transition_range(from_state, "A", "Z", to_state)
    builder.add_transition(from_state, "_", to_state)


def identifier_dfa() -> DFA:
    """``[A-Za-z_][A-Za-z0-9_]*``"""
    builder = DFABuilder()
    _add_letters(builder, START, "IDENTIFIER")
    _add_letters(builder, "IDENTIFIER", "IDENTIFIER")
    builder.add_transition_range("IDENTIFIER", "0", "9", "IDENTIFIER")
    return builder.build(START, {"IDENTIFIER"})


def integer_dfa() -> DFA:
    """``[0-9]+``"""
    builder = DFABuilder()
    builder.add_transition_range(START, "0", "9", "INTEGER")
    builder.add_transition_range("INTEGER", "0", "9", "INTEGER")
    return builder.build(START, {"INTEGER"})


def real_dfa() -> DFA:
    """``[0-9]+\\.[0-9]+``; a trailing point without digits is never accepted."""
    builder = DFABuilder()
    builder.add_transition_range(START, "0", "9", "INTEGER_PART")
    builder.add_transition_range("INTEGER_PART", "0", "9", "INTEGER_PART")
    builder.add_transition("INTEGER_PART", ".", "DECIMAL_POINT")
    builder.add_transition_range("DECIMAL_POINT", "0", "9", "FRACTIONAL_PART")
    builder.add_transition_range("FRACTIONAL_PART", "0", "9", "FRACTIONAL_PART")
    return builder.build(START, {"FRACTIONAL_PART"})


def operator_dfa() -> DFA:
    builder = DFABuilder()
    for char in OPERATOR_CHARS:
        builder.add_transition(START, char, "OPERATOR")
    return builder.build(START, {"OPERATOR"})


def assignment_dfa() -> DFA:
    builder = DFABuilder()
    builder.add_transition(START, ":", "COLON")
    builder.add_transition("COLON", "=", "ASSIGNMENT")
    return builder.build(START, {"ASSIGNMENT"})


def keyword_dfa(word: str) -> DFA:
    """Chain automaton accepting exactly ``word``."""
    if not word:
        raise DFAConstructionError("Keyword must not be empty")

    builder = DFABuilder()
    state = START
    for index, char in enumerate(word):
        next_state = "ACCEPT" if index == len(word) - 1 else f"STATE_{index + 1}"
        builder.add_transition(state, char, next_state)
        state = next_state
    return builder.build(START, {"ACCEPT"})
