"""
Number literal recognizer.

Matches ``digit+ ('.' digit+)? (('e'|'E') ('+'|'-')? digit+)?``.
A trailing '.' or exponent marker without digits leaves the automaton in a
non-accepting state, so "2.", "83e" and "91.e4" are rejected.
"""

from __future__ import annotations

from enum import Enum

from .fsm import FSM


class NumberState(Enum):
    INITIAL = "initial"
    INTEGER = "integer"
    BEGIN_FRACTIONAL = "begin_fractional"
    FRACTIONAL = "fractional"
    BEGIN_EXPONENT = "begin_exponent"
    BEGIN_SIGNED_EXPONENT = "begin_signed_exponent"
    EXPONENT = "exponent"


ACCEPTING_STATES = frozenset({NumberState.INTEGER, NumberState.FRACTIONAL, NumberState.EXPONENT})


def _is_digit(character: str) -> bool:
    return "0" <= character <= "9"


def _next_state(state: NumberState, character: str) -> NumberState | None:
    digit = _is_digit(character)

    if state is NumberState.INITIAL:
        if digit:
            return NumberState.INTEGER

    elif state is NumberState.INTEGER:
        if digit:
            return NumberState.INTEGER
        if character == ".":
            return NumberState.BEGIN_FRACTIONAL
        if character in "eE":
            return NumberState.BEGIN_EXPONENT

    elif state is NumberState.BEGIN_FRACTIONAL:
        if digit:
            return NumberState.FRACTIONAL

    elif state is NumberState.FRACTIONAL:
        if digit:
            return NumberState.FRACTIONAL
        if character in "eE":
            return NumberState.BEGIN_EXPONENT

    elif state is NumberState.BEGIN_EXPONENT:
        if digit:
            return NumberState.EXPONENT
        if character in "+-":
            return NumberState.BEGIN_SIGNED_EXPONENT

    elif state in (NumberState.BEGIN_SIGNED_EXPONENT, NumberState.EXPONENT):
        if digit:
            return NumberState.EXPONENT

    return None


def build_number_recognizer() -> FSM[NumberState]:
    """Build the FSM for floating-point literals."""
    return FSM(
        states=NumberState,
        initial_state=NumberState.INITIAL,
        accepting_states=ACCEPTING_STATES,
        next_state=_next_state,
    )
