"""
Head-movement building blocks.

Each function returns a fresh, unrenamed automaton over `alphabet`
that leaves the tape contents untouched. They are meant to be glued
together with the composition algebra.
"""

from typing import Iterable

from turing_algebra.core.automaton import Automaton
from turing_algebra.core.types import Direction, Symbol, TapeReaction, TapeState

DEFAULT_ALPHABET = frozenset("1234:#_")


def move(
    amount: int,
    name: str,
    direction: Direction,
    alphabet: Iterable[Symbol] = DEFAULT_ALPHABET,
) -> Automaton:
    """
    Move the head `amount` cells in `direction`, then accept.

    States are "0", "1", ..., "amount-1"; the last move lands directly
    on the accept state, so the machine accepts after exactly `amount`
    steps. With amount == 0 it accepts after a single Hold.
    """
    if amount < 0:
        raise ValueError(f"Cannot move a negative amount ({amount})")

    tm = Automaton(initial="0", title=name)

    if amount == 0:
        tm.redirect_state(tm.initial_state, tm.accept_state, alphabet)
        return tm

    for symbol in alphabet:
        for idx in range(amount):
            target = str(idx + 1) if idx + 1 < amount else tm.accept_state
            tm.add_transition(
                TapeState(str(idx), symbol),
                TapeReaction(TapeState(target, symbol), direction),
            )
    return tm


def move_right(
    amount: int,
    name: str = "move_right",
    alphabet: Iterable[Symbol] = DEFAULT_ALPHABET,
) -> Automaton:
    return move(amount, name, Direction.RIGHT, alphabet)


def move_left(
    amount: int,
    name: str = "move_left",
    alphabet: Iterable[Symbol] = DEFAULT_ALPHABET,
) -> Automaton:
    return move(amount, name, Direction.LEFT, alphabet)


def find(
    needle: Symbol,
    name: str,
    direction: Direction,
    alphabet: Iterable[Symbol] = DEFAULT_ALPHABET,
) -> Automaton:
    """Scan in `direction` until `needle` is under the head, then accept in place."""
    tm = Automaton(initial="search", title=name)

    for symbol in alphabet:
        if symbol == needle:
            reaction = TapeReaction(TapeState(tm.accept_state, symbol), Direction.HOLD)
        else:
            reaction = TapeReaction(TapeState("search", symbol), direction)
        tm.add_transition(TapeState("search", symbol), reaction)

    return tm


def find_right(
    needle: Symbol,
    name: str = "find_right",
    alphabet: Iterable[Symbol] = DEFAULT_ALPHABET,
) -> Automaton:
    return find(needle, name, Direction.RIGHT, alphabet)


def find_left(
    needle: Symbol,
    name: str = "find_left",
    alphabet: Iterable[Symbol] = DEFAULT_ALPHABET,
) -> Automaton:
    return find(needle, name, Direction.LEFT, alphabet)


def consume_right(symbol: Symbol, name: str = "consume_right") -> Automaton:
    """Step right over exactly `symbol`; any other symbol rejects."""
    tm = Automaton(initial=symbol, title=name)
    tm.add_transition(
        TapeState(tm.initial_state, symbol),
        TapeReaction(TapeState(tm.accept_state, symbol), Direction.RIGHT),
    )
    return tm
