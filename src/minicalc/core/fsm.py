"""
Deterministic finite-state machine runner.

An FSM is described by its states, an initial state, the accepting states,
and a transition function returning the next state or None. Running it
finds the longest input prefix consumed without an undefined transition,
provided the automaton stops in an accepting state.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from enum import Enum
from typing import Generic, TypeVar

S = TypeVar("S", bound=Hashable)

TransitionFn = Callable[[S, str], S | None]


class FSM(Generic[S]):
    """
    A deterministic automaton over an arbitrary hashable state type.

    Instances hold no run state, so one FSM can be shared by any number of
    callers.
    """

    __slots__ = ("states", "initial_state", "accepting_states", "next_state")

    def __init__(
        self,
        states: Iterable[S],
        initial_state: S,
        accepting_states: Iterable[S],
        next_state: TransitionFn[S],
    ) -> None:
        self.states = frozenset(states)
        self.initial_state = initial_state
        self.accepting_states = frozenset(accepting_states)
        self.next_state = next_state

        if initial_state not in self.states:
            raise ValueError(f"Initial state {initial_state!r} is not a state of this FSM")
        unknown = self.accepting_states - self.states
        if unknown:
            raise ValueError(f"Accepting states {sorted(map(repr, unknown))} are not states")

    def run(self, input: str) -> str | None:
        """
        Run this FSM on ``input``.

        Args:
            input: Text to match from its first character

        Returns:
            The longest matched prefix if the automaton halts in an accepting
            state, otherwise None. The match need not cover the whole input.
        """
        current = self.initial_state
        size = 0

        for character in input:
            following = self.next_state(current, character)
            if following is None:
                break
            current = following
            size += 1

        if current in self.accepting_states:
            return input[:size]
        return None

    def __repr__(self) -> str:
        return f"FSM(initial={self.initial_state!r}, states={len(self.states)})"


# =============================================================================
# Identifier recognizer
# =============================================================================


class IdentifierState(Enum):
    INITIAL = "initial"
    ALPHANUMERIC_OR_UNDERSCORE = "alphanumeric_or_underscore"


def _is_word_char(character: str) -> bool:
    return character.isascii() and (character.isalnum() or character == "_")


def _identifier_transition(state: IdentifierState, character: str) -> IdentifierState | None:
    if state is IdentifierState.INITIAL:
        if _is_word_char(character) and not character.isdigit():
            return IdentifierState.ALPHANUMERIC_OR_UNDERSCORE
    elif _is_word_char(character):
        return IdentifierState.ALPHANUMERIC_OR_UNDERSCORE
    return None


def build_identifier_recognizer() -> FSM[IdentifierState]:
    """Build an FSM matching ``[A-Za-z_][A-Za-z0-9_]*``."""
    return FSM(
        states=IdentifierState,
        initial_state=IdentifierState.INITIAL,
        accepting_states={IdentifierState.ALPHANUMERIC_OR_UNDERSCORE},
        next_state=_identifier_transition,
    )
